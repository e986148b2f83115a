"""Registration, login and profile updates."""
import logging

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.errors import DuplicateEmail, InternalError, InvalidCredentials, ValidationError
from app.core.security import hash_password, verify_password
from app.models.account import Account, Role
from app.models.progress import Progress
from app.schemas.account import AccountOutSchema

logger = logging.getLogger(__name__)


def _check_password_length(password: str) -> None:
    min_length = get_settings().password_min_length
    if len(password) < min_length:
        raise ValidationError(f"Password must be at least {min_length} characters")


def _role_for_new_account(db: Session) -> str:
    """First account ever stored becomes admin; everyone after is a student."""
    count = db.scalar(select(func.count(Account.id)))
    return Role.admin.value if count == 0 else Role.student.value


def _email_taken(db: Session, email: str) -> bool:
    # exact match: emails are not case-normalized
    return db.scalar(select(Account.id).where(Account.email == email)) is not None


def _public_view(account: Account, progress: Progress | None) -> AccountOutSchema:
    return AccountOutSchema(
        id=account.id,
        name=account.name,
        email=account.email,
        role=account.role or Role.student.value,
        progress=progress.progress_percentage if progress else 0,
        completed_lessons=list(progress.completed_lessons) if progress else [],
        bookmarks=list(progress.bookmarks) if progress else [],
    )


def register(db: Session, name: str | None, email: str | None, password: str | None) -> AccountOutSchema:
    """Create an account and its empty progress record in one transaction."""
    if not name or not name.strip() or not email or not password:
        raise ValidationError("All fields are required")
    _check_password_length(password)

    try:
        if _email_taken(db, email):
            raise DuplicateEmail()

        role = _role_for_new_account(db)
        account = Account(name=name, email=email, password_hash=hash_password(password), role=role)
        db.add(account)
        db.flush()

        progress = Progress(
            account_id=account.id,
            completed_lessons=[],
            bookmarks=[],
            progress_percentage=0,
        )
        db.add(progress)
        db.commit()
    except DuplicateEmail:
        db.rollback()
        raise
    except IntegrityError as exc:
        db.rollback()
        # lost a race with a concurrent registration for the same email
        if _email_taken(db, email):
            raise DuplicateEmail() from exc
        logger.exception("Register error")
        raise InternalError() from exc
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.exception("Register error")
        raise InternalError() from exc

    logger.info("Registered account id=%s role=%s", account.id, role)
    return _public_view(account, progress)


def login(db: Session, email: str | None, password: str | None) -> AccountOutSchema:
    """Return the public view with progress, or InvalidCredentials."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    try:
        account = db.scalar(
            select(Account).where(Account.email == email).execution_options(populate_existing=True)
        )
        if account is None or not verify_password(password, account.password_hash):
            raise InvalidCredentials()
        progress = db.scalar(
            select(Progress).where(Progress.account_id == account.id).execution_options(populate_existing=True)
        )
    except SQLAlchemyError as exc:
        logger.exception("Login error")
        raise InternalError() from exc

    return _public_view(account, progress)


def update_profile(db: Session, account_id: int | None, name: str | None, password: str | None = None) -> None:
    """Set a new name and, when given, a new password. Unknown ids are a no-op."""
    if not account_id:
        raise ValidationError("User ID is required")
    if not name or not name.strip():
        raise ValidationError("Name is required")
    if password:
        _check_password_length(password)

    values = {"name": name.strip()}
    try:
        if password:
            values["password_hash"] = hash_password(password)
        db.execute(update(Account).where(Account.id == account_id).values(**values))
        db.commit()
    except (SQLAlchemyError, ValueError) as exc:
        db.rollback()
        logger.exception("Profile update error")
        raise InternalError() from exc
