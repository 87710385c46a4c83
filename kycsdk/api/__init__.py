"""Collaborators at the API boundary: authorization, routes, transport and image encoding."""

from kycsdk.api.auth import AccessAndUserToken, AccessToken, Authorization
from kycsdk.api.images import Base64ImageEncoder, ImageEncoder
from kycsdk.api.router import Route, url_for
from kycsdk.api.transport import HttpxTransport, Transport

__all__ = [
    "AccessToken",
    "AccessAndUserToken",
    "Authorization",
    "Base64ImageEncoder",
    "ImageEncoder",
    "HttpxTransport",
    "Transport",
    "Route",
    "url_for",
]
