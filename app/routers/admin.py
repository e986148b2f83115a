"""Admin routes: account list, deletion, dashboard totals.

No auth guard: callers get the account record from login and the client
decides what to show. See DESIGN.md.
"""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.admin import AccountListSchema, AdminStatsResponseSchema
from app.schemas.common import SuccessSchema
from app.services import admin as admin_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=AccountListSchema)
def list_users(db: Annotated[Session, Depends(get_db)]):
    """All accounts with progress, newest first."""
    return AccountListSchema(users=admin_service.list_accounts(db))


@router.delete("/users/{user_id}", response_model=SuccessSchema)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    admin_service.delete_account(db, user_id)
    return SuccessSchema()


@router.get("/stats", response_model=AdminStatsResponseSchema)
def stats(db: Annotated[Session, Depends(get_db)]):
    return AdminStatsResponseSchema(stats=admin_service.get_stats(db))
