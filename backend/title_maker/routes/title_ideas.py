"""
Title Idea API Routes
CRUD operations for title ideas within a title session.
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from title_maker.auth import Caller, current_user
from title_maker.database import get_session
from title_maker.schemas import (
    DeleteResult,
    IdeaData,
    IdeaListData,
    IdeaListResult,
    IdeaResult,
    TitleIdeaCreate,
    TitleIdeaRead,
    TitleIdeaUpdate,
)
from title_maker.services import title_actions

router = APIRouter()


@router.get("/title-sessions/{session_id}/ideas", response_model=IdeaListResult)
def list_title_ideas(
    session_id: str,
    favorites_only: bool = Query(False, alias="favoritesOnly"),
    selected_only: bool = Query(False, alias="selectedOnly"),
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """
    Get the ideas of a title session.

    favoritesOnly and selectedOnly are combined with AND.
    """
    ideas = title_actions.list_title_ideas(
        db, caller, session_id, favorites_only=favorites_only, selected_only=selected_only
    )
    items = [TitleIdeaRead.model_validate(i) for i in ideas]
    return IdeaListResult(data=IdeaListData(items=items, total=len(items)))


@router.post("/title-sessions/{session_id}/ideas", response_model=IdeaResult, status_code=201)
def create_title_idea(
    session_id: str,
    request: TitleIdeaCreate,
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """Create a new title idea in a title session"""
    idea = title_actions.create_title_idea(db, caller, session_id, request)
    return IdeaResult(data=IdeaData(idea=TitleIdeaRead.model_validate(idea)))


@router.patch("/title-sessions/{session_id}/ideas/{idea_id}", response_model=IdeaResult)
def update_title_idea(
    session_id: str,
    idea_id: str,
    request: TitleIdeaUpdate,
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """Update a title idea's text, tone, style or flags"""
    idea = title_actions.update_title_idea(db, caller, session_id, idea_id, request.to_patch())
    return IdeaResult(data=IdeaData(idea=TitleIdeaRead.model_validate(idea)))


@router.delete("/title-sessions/{session_id}/ideas/{idea_id}", response_model=DeleteResult)
def delete_title_idea(
    session_id: str,
    idea_id: str,
    caller: Caller = Depends(current_user),
    db: Session = Depends(get_session),
):
    """Delete a title idea"""
    title_actions.delete_title_idea(db, caller, session_id, idea_id)
    return DeleteResult()
