"""HTTP Basic Authentication gate."""
import base64
import binascii
import functools
import hmac
from typing import Awaitable, Callable, Optional, Tuple

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response

from config import settings
from core.logging.logger import get_logger
from domain.entities import AuthSettings

Handler = Callable[[Request], Awaitable[Response]]

log = get_logger(__name__, service="auth")


def challenge_header() -> str:
    return f'Basic realm="{settings.AUTH_REALM}"'


def unauthorized() -> Response:
    return PlainTextResponse(
        "Unauthorized",
        status_code=401,
        headers={"WWW-Authenticate": challenge_header()},
    )


def parse_basic_credentials(header: Optional[str]) -> Optional[Tuple[bytes, bytes]]:
    """Split an ``Authorization: Basic ...`` header into (username, password).

    Returns ``None`` when the header is absent, uses another scheme, is not
    valid base64 or has no ``:`` separator.
    """
    if not header:
        return None
    scheme, _, encoded = header.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return None
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError):
        return None
    username, sep, password = decoded.partition(b":")
    if not sep:
        return None
    return username, password


def credentials_match(username: bytes, password: bytes, auth: AuthSettings) -> bool:
    """Compare both fields in constant time.

    Both comparisons always run so the response time does not reveal which
    field was wrong.
    """
    user_ok = hmac.compare_digest(username, auth.username.encode("utf-8"))
    pass_ok = hmac.compare_digest(password, auth.password.encode("utf-8"))
    return user_ok & pass_ok


def require_basic_auth(auth: AuthSettings, handler: Handler) -> Handler:
    """Wrap ``handler`` so it only runs for requests with valid credentials.

    Pass-through when authentication is disabled or either configured
    credential is empty.
    """

    @functools.wraps(handler)
    async def guarded(request: Request) -> Response:
        if not auth.armed:
            return await handler(request)

        credentials = parse_basic_credentials(request.headers.get("authorization"))
        if credentials is None:
            log.info(lambda: "auth-missing-credentials")
            return unauthorized()
        if not credentials_match(*credentials, auth):
            log.warning(lambda: "auth-rejected")
            return unauthorized()
        return await handler(request)

    return guarded
