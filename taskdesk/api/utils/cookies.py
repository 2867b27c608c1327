"""
Session cookie transport.

The cookie carries the opaque session token and nothing else.
"""

from typing import Optional

from fastapi import Request, Response

from taskdesk.app.services.session_tokens import session_ttl
from taskdesk.config import ApplicationConfig


def is_secure_request(request: Request) -> bool:
    """True when the client reached us over https, directly or through a proxy."""
    if request.url.scheme == "https":
        return True
    forwarded_proto = request.headers.get("x-forwarded-proto", "")
    return any(proto.strip().lower() == "https" for proto in forwarded_proto.split(","))


def _cookie_secure(request: Request) -> bool:
    # Browsers drop SameSite=None cookies that are not Secure
    if str(ApplicationConfig.SESSION_COOKIE_SAMESITE).lower() == "none":
        return True
    return is_secure_request(request)


def read_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME) or None


def set_session_cookie(response: Response, request: Request, token: str) -> None:
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(session_ttl().total_seconds()),
        path="/",
        httponly=True,
        secure=_cookie_secure(request),
        samesite=ApplicationConfig.SESSION_COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response, request: Request) -> None:
    response.delete_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=_cookie_secure(request),
        samesite=ApplicationConfig.SESSION_COOKIE_SAMESITE,
    )
