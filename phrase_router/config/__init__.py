"""
Configuration package for the Phrase Router.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    MatcherSettings,
    CacheSettings,
    ProviderSettings,
    HistorySettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "MatcherSettings",
    "CacheSettings",
    "ProviderSettings",
    "HistorySettings",
    "settings",
    "get_settings",
    "reload_settings",
]
