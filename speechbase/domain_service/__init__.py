"""Domain service layer."""

from speechbase.domain_service.mapper import to_record, to_view
from speechbase.domain_service.search import SearchCriteria, SpeechSearchEngine
from speechbase.domain_service.speech import SpeechNotFoundError, SpeechService

__all__ = [
    "SpeechService",
    "SpeechNotFoundError",
    "SpeechSearchEngine",
    "SearchCriteria",
    "to_view",
    "to_record",
]
