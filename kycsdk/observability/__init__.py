"""Observability: structured logging with PII redaction."""

from kycsdk.observability.logging import PIIRedactor, get_logger, setup_logging

__all__ = ["PIIRedactor", "get_logger", "setup_logging"]
