"""Remote services: user records and verifications."""

from kycsdk.services.users import (
    UserService,
    prepare_update_payload,
    reconcile_taxonomies,
)
from kycsdk.services.verifications import VerificationService

__all__ = [
    "UserService",
    "VerificationService",
    "prepare_update_payload",
    "reconcile_taxonomies",
]
