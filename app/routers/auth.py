"""Auth routes: register and login. JSON in, public account view out."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.account import AuthResponseSchema, LoginSchema, RegisterSchema
from app.schemas.common import ErrorSchema
from app.services import accounts

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponseSchema,
    status_code=201,
    responses={400: {"model": ErrorSchema}},
)
def register(
    body: RegisterSchema,
    db: Annotated[Session, Depends(get_db)],
):
    """Create an account. The first account ever registered is the admin."""
    user = accounts.register(db, body.name, body.email, body.password)
    return AuthResponseSchema(user=user)


@router.post(
    "/login",
    response_model=AuthResponseSchema,
    responses={400: {"model": ErrorSchema}, 401: {"model": ErrorSchema}},
)
def login(
    body: LoginSchema,
    db: Annotated[Session, Depends(get_db)],
):
    """Check credentials; return the account with its progress."""
    user = accounts.login(db, body.email, body.password)
    return AuthResponseSchema(user=user)
