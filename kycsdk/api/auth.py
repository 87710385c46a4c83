"""Authorization shapes sent with each request.

Developer and project keys identify the integrating app; user-scoped
operations add the user token. Token renewal is not handled here.
"""

from pydantic import BaseModel, ConfigDict, Field


class AccessToken(BaseModel):
    """Developer and project keys only."""

    model_config = ConfigDict(frozen=True)

    developer_key: str = Field(..., description="Developer key")
    project_key: str = Field(..., description="Project key")

    def headers(self) -> dict[str, str]:
        return {
            "Developer-Authorization": f"Bearer {self.developer_key}",
            "Project": f"Bearer {self.project_key}",
        }


class AccessAndUserToken(AccessToken):
    """Developer and project keys plus the user's session token."""

    user_token: str = Field(..., description="User session token")

    def headers(self) -> dict[str, str]:
        headers = super().headers()
        headers["Authorization"] = f"Bearer {self.user_token}"
        return headers


Authorization = AccessToken | AccessAndUserToken
