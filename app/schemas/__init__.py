from app.schemas.account import AccountOutSchema, AuthResponseSchema, LoginSchema, ProfileUpdateSchema, RegisterSchema
from app.schemas.admin import AccountListSchema, AccountSummarySchema, AdminStatsResponseSchema, AdminStatsSchema
from app.schemas.common import ErrorSchema, HealthSchema, MessageSchema, SuccessSchema
from app.schemas.progress import ProgressOutSchema, ProgressResponseSchema, ProgressUpdateSchema

__all__ = [
    "AccountListSchema",
    "AccountOutSchema",
    "AccountSummarySchema",
    "AdminStatsResponseSchema",
    "AdminStatsSchema",
    "AuthResponseSchema",
    "ErrorSchema",
    "HealthSchema",
    "LoginSchema",
    "MessageSchema",
    "ProfileUpdateSchema",
    "ProgressOutSchema",
    "ProgressResponseSchema",
    "ProgressUpdateSchema",
    "RegisterSchema",
    "SuccessSchema",
]
