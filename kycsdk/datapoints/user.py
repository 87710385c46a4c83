"""User record returned by the onboarding API."""

from pydantic import BaseModel, ConfigDict, Field

from kycsdk.datapoints.collection import DataPointList


class User(BaseModel):
    """A user and the data points stored for them."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    user_id: str = Field(..., description="Server identifier")
    user_token: str | None = Field(
        default=None, description="Session token for user-scoped calls"
    )
    user_data: DataPointList = Field(
        default_factory=DataPointList, description="User data points"
    )
