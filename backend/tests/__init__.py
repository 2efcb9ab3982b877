# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from title_maker.models.title_idea import TitleIdea  # noqa: F401
from title_maker.models.title_session import TitleSession  # noqa: F401
