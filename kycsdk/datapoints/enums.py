"""Enums for the data point domain."""

from enum import Enum


class DataPointKind(str, Enum):
    """Kind of a verifiable user data field.

    Values are the stable wire names used in the `data_type` field.
    """

    PERSONAL_NAME = "name"
    PHONE_NUMBER = "phone"
    EMAIL = "email"
    BIRTH_DATE = "birthdate"
    SSN = "ssn"
    ADDRESS = "address"
    HOUSING = "housing"
    INCOME_SOURCE = "income_source"
    INCOME = "income"
    CREDIT_SCORE = "credit_score"
    PAYDAY_LOAN = "payday_loan"
    MEMBER_OF_ARMED_FORCES = "member_of_armed_forces"
    TIME_AT_ADDRESS = "time_at_address"
    FINANCIAL_ACCOUNT = "financial_account"
    UNKNOWN = "unknown"  # Wire name not recognized by this client

    @property
    def wire_name(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, name: str | None) -> "DataPointKind":
        """Parse a wire name, returning UNKNOWN instead of failing."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


class VerificationStatus(str, Enum):
    """Server-side state of a verification attempt.

    A started verification is PENDING until the secret is submitted or
    the document check finishes; PASSED and FAILED are completed states.
    """

    PENDING = "pending"
    PASSED = "passed"
    FAILED = "failed"
    EXPIRED = "expired"

    @classmethod
    def from_wire(cls, value: str | None) -> "VerificationStatus":
        """Parse a wire status; unrecognized values read as PENDING."""
        try:
            return cls(value)
        except ValueError:
            return cls.PENDING
