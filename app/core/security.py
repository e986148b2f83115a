"""Password hashing (bcrypt via passlib)."""
from passlib.context import CryptContext

from app.core.config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def verify_password(plain: str, hashed: str | None) -> bool:
    """Check plain against a stored hash. A missing or unrecognized hash never matches."""
    if not hashed:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # passlib raises on hashes it cannot identify
        return False


def hash_password(password: str) -> str:
    return pwd_context.hash(password)
