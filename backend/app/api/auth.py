from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..repositories.users import UserRepository
from ..services.auth_service import AuthVerifier
from ..utils.error_handlers import handle_database_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


class SignupRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class SigninRequest(BaseModel):
    username: str | None = None
    password: str | None = None


def get_auth_verifier(db: Session = Depends(get_db)) -> AuthVerifier:
    return AuthVerifier(UserRepository(db))


@router.post("/signup", status_code=201)
def signup(payload: SignupRequest, auth: AuthVerifier = Depends(get_auth_verifier)):
    try:
        user_id = auth.sign_up(payload.username, payload.password)
    except SQLAlchemyError as e:
        raise handle_database_error(e, "creating user")

    return {
        "success": True,
        "message": "User registered successfully",
        "userId": user_id,
    }


@router.post("/signin")
def signin(payload: SigninRequest, auth: AuthVerifier = Depends(get_auth_verifier)):
    logger.info("Signin attempt for: %s", payload.username)
    try:
        result = auth.sign_in(payload.username, payload.password)
    except SQLAlchemyError as e:
        raise handle_database_error(e, "signin")

    return {
        "success": True,
        "message": "Login successful",
        "token": result.token,
        "userId": result.user_id,
        "username": result.username,
    }


@router.post("/signout")
@router.post("/logout")
def signout(auth: AuthVerifier = Depends(get_auth_verifier)):
    # Bearer tokens are stateless: the client signs out by discarding its token.
    # Nothing is revoked server-side and the token stays valid until it expires.
    auth.sign_out()
    return {
        "success": True,
        "message": "Successfully logged out.",
    }
