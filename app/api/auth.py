from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.auth import RegisterIn, LoginIn, AuthOut, UserOut
from app.db.session import get_db
from app.core.security import Identity, TokenIssuer, get_current_identity, get_token_issuer
from app.core.response_builders import build_user_response
from app.services.auth import get_user, login_user, register_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=201)
async def register(
    payload: RegisterIn,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user, token = await register_user(db, issuer, payload.email, payload.password, payload.name)
    return AuthOut(message="User created successfully", token=token, user=build_user_response(user))


@router.post("/login", response_model=AuthOut)
async def login(
    payload: LoginIn,
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user, token = await login_user(db, issuer, payload.email, payload.password)
    return AuthOut(message="Login successful", token=token, user=build_user_response(user))


@router.get("/me", response_model=UserOut)
async def me(
    db: AsyncSession = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    user = await get_user(db, identity.id)
    return build_user_response(user)
