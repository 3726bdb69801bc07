import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from eduassess.api.deps import get_identity
from eduassess.core.db import get_db
from eduassess.core.security import Identity, create_access_token, hash_password, verify_password
from eduassess.models import User
from eduassess.schemas.auth import AuthOut, LoginIn, ProfileOut, RegisterIn, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

def _token_for(user: User) -> str:
    return create_access_token(Identity(user_id=user.id, email=user.email, role=user.role))

@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    existing = db.scalar(select(User.id).where(User.email == payload.email))
    if existing is not None:
        raise HTTPException(400, "User already exists")

    user = User(
        email=payload.email,
        password=hash_password(payload.password),
        name=payload.name,
        role=payload.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.role)

    return AuthOut(message="User created successfully", token=_token_for(user), user=UserOut.model_validate(user))

@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user = db.scalar(select(User).where(User.email == payload.email))
    if not user or not verify_password(payload.password, user.password):
        logger.info("Failed login for %s", payload.email)
        raise HTTPException(400, "Invalid credentials")

    return AuthOut(message="Login successful", token=_token_for(user), user=UserOut.model_validate(user))

@router.get("/profile", response_model=ProfileOut)
def profile(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    user = db.get(User, identity.user_id)
    if not user:
        raise HTTPException(404, "User not found")
    return ProfileOut(user=UserOut.model_validate(user))
