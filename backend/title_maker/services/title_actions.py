"""
Title session and title idea actions.

Every action takes the database session and the caller explicitly and runs
its guards in a fixed order:

1. identity (UNAUTHORIZED when the caller is anonymous)
2. payload preconditions (BAD_REQUEST, before any store access)
3. ownership of the referenced title session (NOT_FOUND)
4. exactly one insert/update/delete/select

The ownership read and the write share one transaction. Mutating actions lock
the owning session row (SELECT ... FOR UPDATE) so it cannot be deleted or
reassigned between the check and the write on stores that support row locks.
"""

import logging
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from sqlmodel import Session, select

from title_maker.auth import Caller, require_user
from title_maker.errors import ActionValidationError, NotFoundError
from title_maker.models.title_idea import TitleIdea
from title_maker.models.title_session import TitleSession, utcnow
from title_maker.schemas import (
    AT_LEAST_ONE_FIELD,
    IdeaPatch,
    SessionPatch,
    TitleIdeaCreate,
    TitleSessionCreate,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return utcnow()


def _new_id() -> str:
    return str(uuid4())


def _require_id(value: str, name: str) -> str:
    if not value or not value.strip():
        raise ActionValidationError(f"{name} is required")
    return value


def get_owned_session(db: Session, session_id: str, user_id: str, for_update: bool = False) -> TitleSession:
    """
    Load a title session owned by ``user_id``.

    Raises NotFoundError both when the session does not exist and when it
    belongs to somebody else.
    """
    query = select(TitleSession).where(TitleSession.id == session_id, TitleSession.user_id == user_id)
    if for_update:
        query = query.with_for_update()

    title_session = db.exec(query).first()
    if title_session is None:
        logger.warning("Title session %s not found for user %s", session_id, user_id)
        raise NotFoundError("Title session not found.")
    return title_session


# ============================================================================
# Title Sessions
# ============================================================================


def create_title_session(db: Session, caller: Optional[Caller], data: TitleSessionCreate) -> TitleSession:
    user = require_user(caller)
    now = _utcnow()

    title_session = TitleSession(
        id=_new_id(),
        user_id=user.user_id,
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    )
    db.add(title_session)
    db.commit()
    db.refresh(title_session)

    logger.info("Created title session %s for user %s", title_session.id, user.user_id)
    return title_session


def update_title_session(db: Session, caller: Optional[Caller], session_id: str, patch: SessionPatch) -> TitleSession:
    """
    Apply ``patch`` to an owned title session.

    Only the fields present in the patch change; updated_at is refreshed on
    every call.
    """
    user = require_user(caller)
    _require_id(session_id, "id")
    if not patch:
        raise ActionValidationError(AT_LEAST_ONE_FIELD)

    title_session = get_owned_session(db, session_id, user.user_id, for_update=True)

    patch.apply(title_session)
    title_session.updated_at = _utcnow()

    db.add(title_session)
    db.commit()
    db.refresh(title_session)

    logger.info("Updated title session %s (%s)", session_id, ", ".join(sorted(patch.changes)))
    return title_session


def list_title_sessions(db: Session, caller: Optional[Caller]) -> List[TitleSession]:
    user = require_user(caller)
    return list(db.exec(select(TitleSession).where(TitleSession.user_id == user.user_id)).all())


# ============================================================================
# Title Ideas
# ============================================================================


def create_title_idea(db: Session, caller: Optional[Caller], session_id: str, data: TitleIdeaCreate) -> TitleIdea:
    user = require_user(caller)
    _require_id(session_id, "sessionId")
    get_owned_session(db, session_id, user.user_id, for_update=True)

    idea = TitleIdea(
        id=_new_id(),
        session_id=session_id,
        title_text=data.title_text,
        tone=data.tone,
        style=data.style,
        is_favorite=data.is_favorite,
        is_selected=data.is_selected,
        created_at=_utcnow(),
    )
    db.add(idea)
    db.commit()
    db.refresh(idea)

    logger.info("Created title idea %s in session %s", idea.id, session_id)
    return idea


def _get_idea(db: Session, session_id: str, idea_id: str) -> TitleIdea:
    idea = db.exec(select(TitleIdea).where(TitleIdea.id == idea_id, TitleIdea.session_id == session_id)).first()
    if idea is None:
        logger.warning("Title idea %s not found in session %s", idea_id, session_id)
        raise NotFoundError("Title idea not found.")
    return idea


def update_title_idea(
    db: Session, caller: Optional[Caller], session_id: str, idea_id: str, patch: IdeaPatch
) -> TitleIdea:
    """
    Apply ``patch`` to an idea in an owned session.

    Ideas carry no updated_at, so nothing besides the patched fields changes.
    Marking an idea selected does not clear the flag on its siblings.
    """
    user = require_user(caller)
    _require_id(idea_id, "id")
    _require_id(session_id, "sessionId")
    if not patch:
        raise ActionValidationError(AT_LEAST_ONE_FIELD)

    get_owned_session(db, session_id, user.user_id, for_update=True)
    idea = _get_idea(db, session_id, idea_id)

    patch.apply(idea)
    db.add(idea)
    db.commit()
    db.refresh(idea)

    logger.info("Updated title idea %s (%s)", idea_id, ", ".join(sorted(patch.changes)))
    return idea


def delete_title_idea(db: Session, caller: Optional[Caller], session_id: str, idea_id: str) -> None:
    user = require_user(caller)
    _require_id(idea_id, "id")
    _require_id(session_id, "sessionId")

    get_owned_session(db, session_id, user.user_id, for_update=True)
    idea = _get_idea(db, session_id, idea_id)

    db.delete(idea)
    db.commit()

    logger.info("Deleted title idea %s from session %s", idea_id, session_id)


def list_title_ideas(
    db: Session,
    caller: Optional[Caller],
    session_id: str,
    favorites_only: bool = False,
    selected_only: bool = False,
) -> List[TitleIdea]:
    """
    List ideas of an owned session.

    Each enabled flag adds a predicate, so both flags together return only
    ideas that are favorite AND selected.
    """
    user = require_user(caller)
    _require_id(session_id, "sessionId")
    get_owned_session(db, session_id, user.user_id)

    filters = [TitleIdea.session_id == session_id]
    if favorites_only:
        filters.append(TitleIdea.is_favorite == True)  # noqa: E712
    if selected_only:
        filters.append(TitleIdea.is_selected == True)  # noqa: E712

    return list(db.exec(select(TitleIdea).where(*filters)).all())
