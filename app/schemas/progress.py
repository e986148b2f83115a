"""Pydantic schemas for lesson progress."""
from pydantic import BaseModel, Field


class ProgressUpdateSchema(BaseModel):
    user_id: int | None = Field(default=None, alias="userId")
    completed_lessons: list[int] | None = Field(default=None, alias="completedLessons")
    bookmarks: list[int] | None = None
    progress_percentage: int | None = Field(default=None, ge=0, le=100, alias="progressPercentage")
    last_lesson_id: int | None = Field(default=None, alias="lastLessonId")

    class Config:
        populate_by_name = True


class ProgressOutSchema(BaseModel):
    completed_lessons: list[int] = Field(default_factory=list, alias="completedLessons")
    bookmarks: list[int] = Field(default_factory=list)
    progress_percentage: int = Field(default=0, alias="progressPercentage")
    last_lesson_id: int = Field(default=1, alias="lastLessonId")

    class Config:
        populate_by_name = True


class ProgressResponseSchema(BaseModel):
    success: bool = True
    progress: ProgressOutSchema
