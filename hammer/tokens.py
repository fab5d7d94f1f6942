"""Bearer token issue/verify.

Tokens are stateless HS256 JWTs carrying ``{email, iat, exp}``. Nothing is
stored server side, so a token cannot be revoked before it expires.
"""

import logging
import time
from typing import Callable

import jwt

from hammer.errors import InvalidToken, TokenExpired

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 60 * 60


class TokenService:
    def __init__(
        self,
        secret: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._ttl = ttl_seconds
        self._clock = clock

    def issue(self, email: str) -> str:
        issued_at = int(self._clock())
        payload = {"email": email, "iat": issued_at, "exp": issued_at + self._ttl}
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> dict:
        """Return ``{"email": ...}`` for a valid token.

        Raises:
            InvalidToken: bad signature, undecodable payload or no email claim.
            TokenExpired: the injected clock is at or past ``exp``.
        """
        try:
            # Expiry is checked below against our own clock.
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"verify_exp": False, "verify_iat": False, "require": ["exp"]},
            )
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token rejected: {e}")
            raise InvalidToken(str(e)) from e

        email = payload.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidToken("Token has no email claim")

        if self._clock() >= payload["exp"]:
            logger.warning(f"Expired token presented for {email}")
            raise TokenExpired()

        return {"email": email}
