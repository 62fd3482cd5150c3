from dataclasses import dataclass
from datetime import datetime, timezone, timedelta
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.enums import UserRole
from app.core.errors import AuthError, ForbiddenError

bearer_scheme = HTTPBearer(auto_error=False)


pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as decoded from a session token."""

    id: int
    email: str
    name: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class TokenIssuer:
    """Signs and verifies session tokens with the secret from ``settings``."""

    def __init__(self, settings: Settings):
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def issue(self, user_id: int, email: str, name: str, role: str, expires_minutes: Optional[int] = None) -> str:
        expires = expires_minutes if expires_minutes is not None else self.expire_minutes
        expire_dt = datetime.now(timezone.utc) + timedelta(minutes=expires)
        to_encode = {
            "sub": str(user_id),
            "id": user_id,
            "email": email,
            "name": name,
            "role": str(role),
            "exp": expire_dt,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise AuthError("Invalid token")

        try:
            return Identity(
                id=int(payload["id"]),
                email=payload["email"],
                name=payload["name"],
                role=UserRole(payload["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthError("Invalid token")


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise AuthError("Access token required")
    return issuer.decode(credentials.credentials)


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if not identity.is_admin:
        raise ForbiddenError("Admin access required")
    return identity
