"""Progress routes: full-replace update and read."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import ErrorSchema, SuccessSchema
from app.schemas.progress import ProgressResponseSchema, ProgressUpdateSchema
from app.services import progress as progress_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("/update", response_model=SuccessSchema)
def update_progress(
    body: ProgressUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
):
    # an unknown userId matches no row and still reports success
    progress_service.update_progress(
        db,
        body.user_id,
        completed_lessons=body.completed_lessons,
        bookmarks=body.bookmarks,
        percentage=body.progress_percentage,
        last_lesson_id=body.last_lesson_id,
    )
    return SuccessSchema()


@router.get("/{user_id}", response_model=ProgressResponseSchema, responses={404: {"model": ErrorSchema}})
def get_progress(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
):
    return ProgressResponseSchema(progress=progress_service.get_progress(db, user_id))
