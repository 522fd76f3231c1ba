"""Configuration dataclasses and environment loaders."""

from .loader import load_navigation_config
from .logging_policy import DebugPolicy, LoggingToggles, load_debug_policy
from .models import NavigationConfig

__all__ = [
    "DebugPolicy",
    "LoggingToggles",
    "NavigationConfig",
    "load_debug_policy",
    "load_navigation_config",
]
