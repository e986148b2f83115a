from app.routers import admin, auth, health, progress, users

__all__ = ["admin", "auth", "health", "progress", "users"]
