"""Configuration model exports.

    from kycsdk.config.models import APIConfig, LoggingConfig
"""

from kycsdk.config.models.api import APIConfig, VerificationConfig
from kycsdk.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "APIConfig",
    "VerificationConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
