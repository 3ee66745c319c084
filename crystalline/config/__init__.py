"""Environment-driven settings for the arbiter service."""
from .settings import ArbiterSettings, load_settings, configure_logging, log_settings_summary

__all__ = [
    "ArbiterSettings",
    "load_settings",
    "configure_logging",
    "log_settings_summary",
]
