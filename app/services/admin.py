"""Admin dashboard: list accounts with progress, delete accounts, totals."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError
from app.models.account import Account, Role
from app.models.progress import Progress
from app.schemas.admin import AccountSummarySchema, AdminStatsSchema

logger = logging.getLogger(__name__)


def list_accounts(db: Session) -> list[AccountSummarySchema]:
    """Every account with its progress, newest first."""
    stmt = (
        select(Account, Progress)
        .outerjoin(Progress, Progress.account_id == Account.id)
        .order_by(Account.created_at.desc(), Account.id.desc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.exception("Admin get users error")
        raise InternalError() from exc

    users = []
    for account, progress in rows:
        completed = list(progress.completed_lessons) if progress else []
        users.append(
            AccountSummarySchema(
                id=account.id,
                name=account.name,
                email=account.email,
                role=account.role or Role.student.value,
                created_at=account.created_at,
                progress_percentage=progress.progress_percentage if progress else None,
                completed_lessons=completed,
                lesson_count=len(completed),
            )
        )
    return users


def delete_account(db: Session, account_id: int) -> bool:
    """Remove an account and its progress. Unknown ids are not an error."""
    try:
        account = db.get(Account, account_id)
        if account is None:
            return False
        db.delete(account)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Admin delete user error")
        raise InternalError() from exc

    logger.info("Deleted account id=%s", account_id)
    return True


def get_stats(db: Session) -> AdminStatsSchema:
    """Totals shown on top of the dashboard."""
    users = list_accounts(db)
    percentages = [u.progress_percentage or 0 for u in users]
    average = round(sum(percentages) / len(percentages)) if percentages else 0
    return AdminStatsSchema(
        total_users=len(users),
        average_progress=average,
        completed_users=sum(1 for p in percentages if p == 100),
    )
