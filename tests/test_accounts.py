import pytest
from sqlalchemy import func, select

from app.core.errors import DuplicateEmail, InternalError, InvalidCredentials, ValidationError
from app.core.security import verify_password
from app.models.account import Account
from app.models.progress import Progress
from app.services import accounts
from app.services import progress as progress_service


def test_first_account_is_admin_then_students(db):
    first = accounts.register(db, "Ada", "ada@example.com", "secret1")
    second = accounts.register(db, "Bob", "bob@example.com", "secret2")

    assert first.role == "admin"
    assert second.role == "student"


def test_register_returns_public_view_with_empty_progress(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")

    assert user.id > 0
    assert user.name == "Ada"
    assert user.email == "ada@example.com"
    assert user.progress == 0
    assert user.completed_lessons == []
    assert user.bookmarks == []
    assert "password" not in user.model_dump()
    assert "password_hash" not in user.model_dump()

    stored = progress_service.get_progress(db, user.id)
    assert stored.completed_lessons == []
    assert stored.bookmarks == []
    assert stored.progress_percentage == 0


def test_register_stores_hash_not_plaintext(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")
    account = db.get(Account, user.id)

    assert account.password_hash != "secret1"
    assert verify_password("secret1", account.password_hash)


@pytest.mark.parametrize(
    "name,email,password",
    [
        ("", "a@example.com", "secret1"),
        ("Ada", "", "secret1"),
        ("Ada", "a@example.com", ""),
        (None, "a@example.com", "secret1"),
        ("   ", "a@example.com", "secret1"),
    ],
)
def test_register_requires_all_fields(db, name, email, password):
    with pytest.raises(ValidationError) as exc:
        accounts.register(db, name, email, password)
    assert exc.value.message == "All fields are required"
    assert db.scalar(select(func.count(Account.id))) == 0


def test_password_length_boundary(db):
    with pytest.raises(ValidationError) as exc:
        accounts.register(db, "Ada", "ada@example.com", "12345")
    assert exc.value.message == "Password must be at least 6 characters"

    user = accounts.register(db, "Ada", "ada@example.com", "123456")
    assert user.id > 0


def test_duplicate_email_rejected_and_single_row_kept(db):
    accounts.register(db, "Ada", "ada@example.com", "secret1")

    with pytest.raises(DuplicateEmail):
        accounts.register(db, "Ada Again", "ada@example.com", "secret2")

    count = db.scalar(select(func.count(Account.id)).where(Account.email == "ada@example.com"))
    assert count == 1


def test_unique_violation_on_insert_reported_as_duplicate(db, monkeypatch):
    accounts.register(db, "Ada", "ada@example.com", "secret1")

    real_email_taken = accounts._email_taken
    calls = []

    def stale_email_taken(session, email):
        # the first lookup misses the row, as when another request commits in between
        calls.append(email)
        if len(calls) == 1:
            return False
        return real_email_taken(session, email)

    monkeypatch.setattr(accounts, "_email_taken", stale_email_taken)

    with pytest.raises(DuplicateEmail):
        accounts.register(db, "Ada Again", "ada@example.com", "secret2")

    assert len(calls) == 2
    count = db.scalar(select(func.count(Account.id)).where(Account.email == "ada@example.com"))
    assert count == 1
    assert db.scalar(select(func.count(Progress.id))) == 1


def test_email_match_is_case_sensitive(db):
    accounts.register(db, "Ada", "ada@example.com", "secret1")
    other = accounts.register(db, "Ada", "ADA@example.com", "secret1")
    assert other.role == "student"

    with pytest.raises(InvalidCredentials):
        accounts.login(db, "Ada@Example.com", "secret1")


def test_failed_progress_insert_rolls_back_account(db, monkeypatch):
    def broken_progress(**kwargs):
        kwargs["account_id"] = None
        return Progress(**kwargs)

    monkeypatch.setattr(accounts, "Progress", broken_progress)

    with pytest.raises(InternalError):
        accounts.register(db, "Ada", "ada@example.com", "secret1")

    assert db.scalar(select(func.count(Account.id))) == 0
    assert db.scalar(select(func.count(Progress.id))) == 0


def test_login_returns_progress(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")
    progress_service.update_progress(db, user.id, [1, 2], [2], 20)

    logged_in = accounts.login(db, "ada@example.com", "secret1")

    assert logged_in.id == user.id
    assert logged_in.role == "admin"
    assert logged_in.progress == 20
    assert logged_in.completed_lessons == [1, 2]
    assert logged_in.bookmarks == [2]


def test_login_failures_are_indistinguishable(db):
    accounts.register(db, "Ada", "ada@example.com", "secret1")

    with pytest.raises(InvalidCredentials) as wrong_password:
        accounts.login(db, "ada@example.com", "wrong-pass")
    with pytest.raises(InvalidCredentials) as unknown_email:
        accounts.login(db, "nobody@example.com", "secret1")

    assert wrong_password.value.message == unknown_email.value.message
    assert wrong_password.value.status_code == unknown_email.value.status_code == 401


def test_login_without_progress_defaults_to_empty(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")
    db.query(Progress).filter(Progress.account_id == user.id).delete()
    db.commit()

    logged_in = accounts.login(db, "ada@example.com", "secret1")
    assert logged_in.progress == 0
    assert logged_in.completed_lessons == []
    assert logged_in.bookmarks == []


def test_login_requires_email_and_password(db):
    with pytest.raises(ValidationError) as exc:
        accounts.login(db, "ada@example.com", "")
    assert exc.value.message == "Email and password are required"


def test_update_profile_name_only_keeps_password(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")

    accounts.update_profile(db, user.id, "  Ada Lovelace  ")

    logged_in = accounts.login(db, "ada@example.com", "secret1")
    assert logged_in.name == "Ada Lovelace"


def test_update_profile_changes_password(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")

    accounts.update_profile(db, user.id, "Ada", "newsecret")

    with pytest.raises(InvalidCredentials):
        accounts.login(db, "ada@example.com", "secret1")
    assert accounts.login(db, "ada@example.com", "newsecret").id == user.id


def test_update_profile_validation(db):
    user = accounts.register(db, "Ada", "ada@example.com", "secret1")

    with pytest.raises(ValidationError) as exc:
        accounts.update_profile(db, user.id, "   ")
    assert exc.value.message == "Name is required"

    with pytest.raises(ValidationError) as exc:
        accounts.update_profile(db, user.id, "Ada", "12345")
    assert exc.value.message == "Password must be at least 6 characters"

    with pytest.raises(ValidationError) as exc:
        accounts.update_profile(db, None, "Ada")
    assert exc.value.message == "User ID is required"

    # nothing changed
    assert accounts.login(db, "ada@example.com", "secret1").name == "Ada"
