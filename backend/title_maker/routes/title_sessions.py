"""
Title Session API Routes
Create, update and list the caller's title sessions.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from title_maker.auth import Caller, current_user
from title_maker.database import get_session
from title_maker.schemas import (
    SessionData,
    SessionListData,
    SessionListResult,
    SessionResult,
    TitleSessionCreate,
    TitleSessionRead,
    TitleSessionUpdate,
)
from title_maker.services import title_actions

router = APIRouter()


@router.post("/title-sessions", response_model=SessionResult, status_code=201)
def create_title_session(
    request: TitleSessionCreate,
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """Create a new title session owned by the caller"""
    title_session = title_actions.create_title_session(db, caller, request)
    return SessionResult(data=SessionData(session=TitleSessionRead.model_validate(title_session)))


@router.patch("/title-sessions/{session_id}", response_model=SessionResult)
def update_title_session(
    session_id: str,
    request: TitleSessionUpdate,
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """
    Update a title session.

    Only fields present in the body change; updatedAt is always refreshed.
    """
    title_session = title_actions.update_title_session(db, caller, session_id, request.to_patch())
    return SessionResult(data=SessionData(session=TitleSessionRead.model_validate(title_session)))


@router.get("/title-sessions", response_model=SessionListResult)
def list_title_sessions(caller: Caller = Depends(current_user), db: Session = Depends(get_session)):
    """Get all title sessions of the caller"""
    sessions = title_actions.list_title_sessions(db, caller)
    items = [TitleSessionRead.model_validate(s) for s in sessions]
    return SessionListResult(data=SessionListData(items=items, total=len(items)))
