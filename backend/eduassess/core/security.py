from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from eduassess.core.config import settings

# bcrypt only looks at the first 72 bytes
_BCRYPT_MAX_BYTES = 72

@dataclass(frozen=True)
class Identity:
    """Caller identity decoded from a bearer token, scoped to one request."""
    user_id: int
    email: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

def _pw_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]

def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_pw_bytes(password), salt).decode("ascii")

def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_pw_bytes(password), password_hash.encode("ascii"))

def create_access_token(identity: Identity) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_minutes)
    payload = {
        "sub": str(identity.user_id),
        "email": identity.email,
        "role": identity.role,
        "exp": expires,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

def decode_access_token(token: str) -> Identity:
    """Raises jwt.InvalidTokenError for bad signatures, expiry or missing claims."""
    data = jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )
    try:
        return Identity(user_id=int(data["sub"]), email=data.get("email", ""), role=data.get("role", "student"))
    except (KeyError, ValueError) as e:
        raise jwt.InvalidTokenError("Malformed token claims") from e
