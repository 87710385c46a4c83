"""Endpoint paths of the onboarding API."""

from enum import Enum


class Route(str, Enum):
    """API routes; `{verification_id}` placeholders are filled by `url_for`."""

    USER = "v1/user"
    LOGIN = "v1/user/login"
    VERIFICATION_START = "v1/verifications/start"
    VERIFICATION_FINISH = "v1/verifications/{verification_id}/finish"
    VERIFICATION_STATUS = "v1/verifications/{verification_id}"
    VERIFICATION_RESTART = "v1/verifications/{verification_id}/restart"
    DOCUMENT_VERIFICATION = "v1/verifications/document"
    DOCUMENT_VERIFICATION_STATUS = "v1/verifications/document/{verification_id}"


def url_for(base_url: str, route: Route, **params: str) -> str:
    """Build an absolute URL for a route."""
    path = route.value.format(**params) if params else route.value
    return f"{base_url.rstrip('/')}/{path}"
