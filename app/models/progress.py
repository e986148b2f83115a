"""Progress model: one per account. Completed lessons, bookmarks, percentage."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base
from app.db.types import IntList


class Progress(Base):
    __tablename__ = "progress"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )

    completed_lessons = Column(IntList, nullable=False, default=list)
    bookmarks = Column(IntList, nullable=False, default=list)
    progress_percentage = Column(Integer, nullable=False, default=0, server_default="0")  # 0-100
    last_lesson_id = Column(Integer, nullable=False, default=1, server_default="1")
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=True
    )

    account = relationship("Account", back_populates="progress")
