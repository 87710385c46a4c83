"""Verification record model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kycsdk.datapoints.enums import VerificationStatus


class Verification(BaseModel):
    """State of one verification attempt.

    Returned by the verification service; once attached to a data point
    it is owned by that data point and copied along with it.
    """

    model_config = ConfigDict(validate_assignment=True)

    verification_id: str = Field(..., description="Server identifier")
    status: VerificationStatus = Field(
        default=VerificationStatus.PENDING, description="Current status"
    )
    verification_type: str | None = Field(
        default=None, description="Datapoint type the verification was started for"
    )
    secret: str | None = Field(
        default=None, description="Out-of-band secret, echoed only for automation"
    )
    verification_result: dict[str, Any] | None = Field(
        default=None, description="Opaque document verification outcome"
    )

    @property
    def is_completed(self) -> bool:
        return self.status in (VerificationStatus.PASSED, VerificationStatus.FAILED)

    @property
    def is_passed(self) -> bool:
        return self.status == VerificationStatus.PASSED
