from title_maker.models.title_idea import TitleIdea
from title_maker.models.title_session import TitleSession

__all__ = [
    "TitleSession",
    "TitleIdea",
]
