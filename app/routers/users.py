"""User routes: profile update."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.account import ProfileUpdateSchema
from app.schemas.common import MessageSchema
from app.services import accounts

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/profile", response_model=MessageSchema)
def update_profile(
    body: ProfileUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
):
    """Change display name and optionally password."""
    accounts.update_profile(db, body.user_id, body.name, body.password)
    return MessageSchema(message="Profile updated successfully")
