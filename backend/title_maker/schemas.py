"""
Request/response models for the title session and title idea endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator, model_validator
from pydantic.alias_generators import to_camel

AT_LEAST_ONE_FIELD = "At least one field must be provided to update."

SESSION_FIELDS = frozenset(
    {"content_type", "working_title", "topic", "target_audience", "language", "notes"}
)
IDEA_FIELDS = frozenset({"title_text", "tone", "style", "is_favorite", "is_selected"})


# ============================================================================
# Patch objects
# ============================================================================


@dataclass(frozen=True)
class Patch:
    """
    Fields explicitly supplied by the caller, keyed by model attribute name.

    A field that is absent from ``changes`` is left untouched when the patch
    is applied. Presence is tracked by key, never by a None sentinel.
    """

    allowed_fields: ClassVar[FrozenSet[str]] = frozenset()

    changes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        unknown = set(self.changes) - self.allowed_fields
        if unknown:
            raise ValueError(f"Unknown fields in patch: {', '.join(sorted(unknown))}")

    @classmethod
    def from_request(cls, request: BaseModel) -> "Patch":
        return cls(changes=request.model_dump(include=request.model_fields_set))

    def __bool__(self) -> bool:
        return bool(self.changes)

    def apply(self, target: Any) -> None:
        for name, value in self.changes.items():
            setattr(target, name, value)


class SessionPatch(Patch):
    allowed_fields = SESSION_FIELDS


class IdeaPatch(Patch):
    allowed_fields = IDEA_FIELDS


# ============================================================================
# Request Models
# ============================================================================


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_null(v):
    # Optional fields may be omitted but not sent as null
    if v is None:
        raise ValueError("must be a string or omitted, not null")
    return v


def _require_title_text(v: str) -> str:
    if not v:
        raise ValueError("titleText cannot be empty")
    return v


def ensure_utc(value: datetime) -> datetime:
    """Stored timestamps are UTC; SQLite returns them without an offset"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class TitleSessionCreate(CamelModel):
    content_type: Optional[str] = None
    working_title: Optional[str] = None
    topic: Optional[str] = None
    target_audience: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_not_null(cls, v):
        return _reject_null(v)


class TitleSessionUpdate(TitleSessionCreate):
    @model_validator(mode="after")
    def validate_has_changes(self):
        if not self.model_fields_set:
            raise ValueError(AT_LEAST_ONE_FIELD)
        return self

    def to_patch(self) -> SessionPatch:
        return SessionPatch.from_request(self)


class TitleIdeaCreate(CamelModel):
    title_text: str
    tone: Optional[str] = None
    style: Optional[str] = None
    is_favorite: StrictBool = False
    is_selected: StrictBool = False

    @field_validator("tone", "style", mode="before")
    @classmethod
    def validate_not_null(cls, v):
        return _reject_null(v)

    @field_validator("title_text")
    @classmethod
    def validate_title_text(cls, v):
        return _require_title_text(v)


class TitleIdeaUpdate(CamelModel):
    title_text: Optional[str] = None
    tone: Optional[str] = None
    style: Optional[str] = None
    is_favorite: Optional[StrictBool] = None
    is_selected: Optional[StrictBool] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_not_null(cls, v):
        return _reject_null(v)

    @field_validator("title_text")
    @classmethod
    def validate_title_text(cls, v):
        return _require_title_text(v)

    @model_validator(mode="after")
    def validate_has_changes(self):
        if not self.model_fields_set:
            raise ValueError(AT_LEAST_ONE_FIELD)
        return self

    def to_patch(self) -> IdeaPatch:
        return IdeaPatch.from_request(self)


# ============================================================================
# Response Models
# ============================================================================


class TitleSessionRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    content_type: Optional[str] = None
    working_title: Optional[str] = None
    topic: Optional[str] = None
    target_audience: Optional[str] = None
    language: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_utc(cls, v):
        return ensure_utc(v)


class TitleIdeaRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    title_text: str
    tone: Optional[str] = None
    style: Optional[str] = None
    is_favorite: bool
    is_selected: bool
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def validate_utc(cls, v):
        return ensure_utc(v)


class SessionData(BaseModel):
    session: TitleSessionRead


class SessionResult(BaseModel):
    success: bool = True
    data: SessionData


class SessionListData(BaseModel):
    items: List[TitleSessionRead]
    total: int


class SessionListResult(BaseModel):
    success: bool = True
    data: SessionListData


class IdeaData(BaseModel):
    idea: TitleIdeaRead


class IdeaResult(BaseModel):
    success: bool = True
    data: IdeaData


class IdeaListData(BaseModel):
    items: List[TitleIdeaRead]
    total: int


class IdeaListResult(BaseModel):
    success: bool = True
    data: IdeaListData


class DeleteResult(BaseModel):
    success: bool = True
