"""Global search engine and record library instances to avoid circular imports."""

from .config import get_settings
from .core.engine import SearchEngine
from .core.library import RecordLibrary
from .core.ranker import FieldWeights

settings = get_settings()

# Global search engine instance
search_engine = SearchEngine(
    weights=FieldWeights(
        name=settings.name_weight,
        value=settings.value_weight,
        description=settings.description_weight,
        tags=settings.tags_weight,
    ),
    score_threshold=settings.score_threshold,
    suggestion_threshold=settings.suggestion_threshold,
)

# Records served by the API
record_library = RecordLibrary()
