from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from title_maker.models.title_idea import TitleIdea


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TitleSession(SQLModel, table=True):
    id: str = Field(primary_key=True)
    user_id: str = Field(index=True)
    content_type: Optional[str] = None  # "blog", "video", "course", etc.
    working_title: Optional[str] = None  # initial user idea
    topic: Optional[str] = None
    target_audience: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False)
    )

    # Relationships
    ideas: List["TitleIdea"] = Relationship(back_populates="session", cascade_delete=True)
