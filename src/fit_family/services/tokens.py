"""Bearer token issuing and validation."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from fit_family.domain.models import UserRecord
from fit_family.errors import InvalidTokenError


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TokenService:
    """Signs and verifies JWTs carrying the user's email, id and role."""

    secret: str
    ttl: timedelta
    algorithm: str = "HS256"
    clock: Callable[[], datetime] = field(default=_utc_now)

    def issue(self, user: UserRecord) -> str:
        """Return a signed token for the user."""
        now = self.clock()
        claims = {
            "sub": user.email,
            "userId": str(user.id),
            "role": str(user.role),
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> dict[str, object]:
        """Return the token claims, raising InvalidTokenError if unusable."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidTokenError("Invalid authentication token") from exc
        exp = claims.get("exp")
        if not isinstance(exp, int | float):
            raise InvalidTokenError("Invalid authentication token")
        if exp <= self.clock().timestamp():
            raise InvalidTokenError("Authentication token has expired")
        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Invalid authentication token")
        return claims

    def resolve_identity(self, token: str) -> str:
        """Return the email the token was issued for."""
        return str(self.validate(token)["sub"])
