"""Remote API configuration models."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """Connection settings for the onboarding API."""

    base_url: str = Field(
        default="https://api.sbx.example-kyc.com",
        description="Base URL of the onboarding API",
    )
    timeout: float = Field(
        default=30.0, gt=0.0, description="Request timeout in seconds"
    )


class VerificationConfig(BaseModel):
    """Verification workflow settings."""

    show_verification_secret: bool = Field(
        default=True,
        description="Ask the server to echo the verification secret (automation only)",
    )
    document_datapoint_type: str = Field(
        default="AU10TIX",
        description="Datapoint type sent with document verification requests",
    )
