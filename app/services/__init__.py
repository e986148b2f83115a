from app.services import accounts, admin, progress

__all__ = ["accounts", "admin", "progress"]
