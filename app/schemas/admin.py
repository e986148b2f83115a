"""Pydantic schemas for the admin dashboard."""
from datetime import datetime

from pydantic import BaseModel, Field


class AccountSummarySchema(BaseModel):
    # snake_case on the wire: the dashboard reads these names directly
    id: int
    name: str
    email: str
    role: str
    created_at: datetime | None = None
    progress_percentage: int | None = None
    completed_lessons: list[int] = Field(default_factory=list)
    lesson_count: int = 0


class AccountListSchema(BaseModel):
    success: bool = True
    users: list[AccountSummarySchema]


class AdminStatsSchema(BaseModel):
    total_users: int = Field(alias="totalUsers")
    average_progress: int = Field(alias="averageProgress")
    completed_users: int = Field(alias="completedUsers")

    class Config:
        populate_by_name = True


class AdminStatsResponseSchema(BaseModel):
    success: bool = True
    stats: AdminStatsSchema
