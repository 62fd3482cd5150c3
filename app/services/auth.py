"""Credential store and session issuing"""
import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.enums import UserRole
from app.core.errors import ConflictError, InvalidCredentialsError, NotFoundError, ValidationError
from app.core.metrics import auth_events, track_db_operation
from app.core.security import TokenIssuer, hash_password, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    res = await db.execute(select(User).where(User.email == email))
    return res.scalars().first()


@track_db_operation("select", "users")
async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


@track_db_operation("insert", "users")
async def create_user(
    db: AsyncSession,
    email: str,
    password: str,
    name: str,
    role: UserRole = UserRole.CLIENT,
) -> User:
    if await get_user_by_email(db, email):
        raise ConflictError("Email already exists")

    user = User(email=email, password_hash=hash_password(password), name=name, role=role)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email.
        await db.rollback()
        raise ConflictError("Email already exists")
    await db.refresh(user)
    return user


def issue_token(issuer: TokenIssuer, user: User) -> str:
    return issuer.issue(user.id, user.email, user.name, user.role)


async def register_user(
    db: AsyncSession,
    issuer: TokenIssuer,
    email: Optional[str],
    password: Optional[str],
    name: Optional[str],
) -> Tuple[User, str]:
    if not email or not password or not name:
        auth_events.labels(event="register", outcome="invalid").inc()
        raise ValidationError("All fields are required")

    try:
        user = await create_user(db, email, password, name, UserRole.CLIENT)
    except ConflictError:
        auth_events.labels(event="register", outcome="conflict").inc()
        logger.info(f"Registration rejected, email already in use: {email}")
        raise

    auth_events.labels(event="register", outcome="success").inc()
    logger.info(f"Registered client user {user.id}")
    return user, issue_token(issuer, user)


@track_db_operation("select", "users")
async def login_user(
    db: AsyncSession,
    issuer: TokenIssuer,
    email: Optional[str],
    password: Optional[str],
) -> Tuple[User, str]:
    if not email or not password:
        auth_events.labels(event="login", outcome="invalid").inc()
        raise ValidationError("Email and password are required")

    user = await get_user_by_email(db, email)
    # Same error for unknown email and wrong password.
    if not user or not verify_password(password, user.password_hash):
        auth_events.labels(event="login", outcome="failure").inc()
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError("Invalid credentials")

    auth_events.labels(event="login", outcome="success").inc()
    logger.info(f"User {user.id} logged in")
    return user, issue_token(issuer, user)
