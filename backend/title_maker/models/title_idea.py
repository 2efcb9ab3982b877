from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlmodel import Column, Field, Relationship, SQLModel

from title_maker.models.title_session import utcnow

if TYPE_CHECKING:
    from title_maker.models.title_session import TitleSession


class TitleIdea(SQLModel, table=True):
    id: str = Field(primary_key=True)
    session_id: str = Field(foreign_key="titlesession.id", index=True, ondelete="CASCADE")
    title_text: str
    tone: Optional[str] = None  # "catchy", "serious", "educational", etc.
    style: Optional[str] = None  # "listicle", "how-to", "question", etc.
    is_favorite: bool = Field(default=False)
    # Final chosen title; only one is expected per session but nothing enforces it
    is_selected: bool = Field(default=False)
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False)
    )

    # Relationships
    session: "TitleSession" = Relationship(back_populates="ideas")
