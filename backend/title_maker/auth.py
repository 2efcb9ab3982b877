"""
Caller identity

Authentication itself happens upstream: the gateway verifies the user and
forwards their id in a request header (``USER_ID_HEADER``). This module turns
that header into an explicit ``Caller`` value which is passed into every
action.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from title_maker.config import USER_ID_HEADER
from title_maker.errors import UnauthorizedError

logger = logging.getLogger(__name__)

SIGN_IN_REQUIRED = "You must be signed in to perform this action."


@dataclass(frozen=True)
class Caller:
    """The signed-in user an action runs on behalf of."""

    user_id: str


def get_caller(request: Request) -> Optional[Caller]:
    """
    Dependency returning the caller identity, or None when the request is anonymous.
    Blank header values are treated as missing.
    """
    user_id = request.headers.get(USER_ID_HEADER)
    if user_id is None or not user_id.strip():
        return None
    return Caller(user_id=user_id.strip())


def require_user(caller: Optional[Caller]) -> Caller:
    """Reject anonymous calls with UNAUTHORIZED."""
    if caller is None:
        logger.warning("Rejected anonymous call")
        raise UnauthorizedError(SIGN_IN_REQUIRED)
    return caller


def current_user(caller: Optional[Caller] = Depends(get_caller)) -> Caller:
    """
    Dependency that requires a signed-in caller.
    Dependencies resolve before the request body is validated, so anonymous
    requests fail with 401 even when their payload is also invalid.
    """
    return require_user(caller)
