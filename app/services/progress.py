"""Lesson progress: read and full replace."""
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError, NotFound, ValidationError
from app.models.progress import Progress
from app.schemas.progress import ProgressOutSchema

logger = logging.getLogger(__name__)


def get_progress(db: Session, account_id: int) -> ProgressOutSchema:
    try:
        progress = db.scalar(
            select(Progress).where(Progress.account_id == account_id).execution_options(populate_existing=True)
        )
    except SQLAlchemyError as exc:
        logger.exception("Get progress error")
        raise InternalError() from exc

    if progress is None:
        raise NotFound("Progress not found")

    return ProgressOutSchema(
        completed_lessons=list(progress.completed_lessons),
        bookmarks=list(progress.bookmarks),
        progress_percentage=progress.progress_percentage,
        last_lesson_id=progress.last_lesson_id,
    )


def update_progress(
    db: Session,
    account_id: int | None,
    completed_lessons: list[int] | None = None,
    bookmarks: list[int] | None = None,
    percentage: int | None = None,
    last_lesson_id: int | None = None,
) -> bool:
    """Overwrite the stored lists and percentage with what the caller sends.

    Nothing is merged: callers send their complete current state. Returns False
    when no record exists for the account; that is not treated as an error.
    """
    if not account_id:
        raise ValidationError("User ID is required")

    values = {
        "completed_lessons": list(completed_lessons or []),
        "bookmarks": list(bookmarks or []),
        "progress_percentage": percentage or 0,
    }
    if last_lesson_id is not None:
        values["last_lesson_id"] = last_lesson_id

    try:
        result = db.execute(update(Progress).where(Progress.account_id == account_id).values(**values))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Update progress error")
        raise InternalError() from exc

    if result.rowcount == 0:
        logger.info("Progress update for account id=%s matched no record", account_id)
    return result.rowcount > 0
