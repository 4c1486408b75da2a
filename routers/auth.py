from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from database.db import get_db
from dependencies.security import CurrentUser
from models.users import User as UserModel
from schemas.users import LoginRequest, RegisterRequest, TokenResponse, User as UserSchema
from utils.security import hash_password, new_api_token, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


# ✅ [REGISTER] create an account and issue a token
@router.post("/register", status_code=201, response_model=TokenResponse)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    if db.query(UserModel).filter(UserModel.email == request.email).first():
        raise HTTPException(status_code=422, detail="The email has already been taken.")

    user = UserModel(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        api_token=new_api_token(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return {"user": UserSchema.model_validate(user), "token": user.api_token}


# ✅ [LOGIN] exchange credentials for a fresh token
@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(UserModel).filter(UserModel.email == request.email).first()
    if user is None or not verify_password(request.password, user.password_hash):
        logger.warning("Failed login for %s", request.email)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    user.api_token = new_api_token()
    db.commit()
    db.refresh(user)
    return {"user": UserSchema.model_validate(user), "token": user.api_token}


# ✅ [LOGOUT] revoke the current token
@router.post("/logout")
def logout(user: CurrentUser, db: Session = Depends(get_db)):
    user.api_token = None
    db.commit()
    return {"message": "Logged out successfully"}


# ✅ [READ] authenticated user
@router.get("/user", response_model=UserSchema)
def current_user(user: CurrentUser):
    return user


@router.get("/protected-route")
def protected_route(user: CurrentUser):
    return {
        "message": "You are authorized!",
        "user": UserSchema.model_validate(user).model_dump(),
    }
