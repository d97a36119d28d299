"""
JWT token adapter - Implements TokenIssuer protocol with python-jose.

Tokens are HMAC-signed JWTs. ``exp`` bounds validity; ``iat`` records
issue time. Every decoding failure is reported as the same
InvalidOrExpiredToken so callers cannot tell a forged token from an
expired one.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from storifal.domain.exceptions import InvalidOrExpiredToken


class JoseTokenIssuer:
    """
    Implements TokenIssuer protocol via python-jose.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._algorithm = algorithm

    def sign(self, claims: dict[str, Any], ttl: timedelta) -> str:
        """Create a signed token carrying ``claims`` that expires after ``ttl``."""
        now = datetime.now(timezone.utc)
        to_encode = dict(claims)
        to_encode.update({"iat": now, "exp": now + ttl})
        return jwt.encode(to_encode, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token.

        Raises:
            InvalidOrExpiredToken: Bad signature, expired, malformed,
                or missing an ``exp`` claim
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except JWTError:
            raise InvalidOrExpiredToken() from None
