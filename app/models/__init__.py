from app.models.account import Account, Role
from app.models.progress import Progress

__all__ = ["Account", "Role", "Progress"]
