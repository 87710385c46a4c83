"""Test factories for creating test data."""

from tests.factories.datapoints import DataPointFactory, VerificationFactory
from tests.factories.transport import RecordingTransport, user_payload, verification_payload

__all__ = [
    "DataPointFactory",
    "VerificationFactory",
    "RecordingTransport",
    "user_payload",
    "verification_payload",
]
