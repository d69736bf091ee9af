"""Speech service: CRUD plus composite search."""

import logging
from datetime import date

from speechbase.domain.models import Speech, SpeechView
from speechbase.domain.protocols import SpeechStoreProtocol
from speechbase.domain_service.mapper import to_record, to_view
from speechbase.domain_service.search import SearchCriteria, SpeechSearchEngine

logger = logging.getLogger(__name__)


class SpeechNotFoundError(Exception):
    """Raised at the API boundary when a speech id has no record."""

    def __init__(self, speech_id: int):
        self.speech_id = speech_id
        super().__init__(f"Speech not found: {speech_id}")


def _merge(existing: Speech, changes: SpeechView) -> None:
    """Overwrite each field of ``existing`` that ``changes`` supplies.

    None means "leave untouched"; a supplied keyword list replaces the whole set.
    """
    if changes.text is not None:
        existing.text = changes.text
    if changes.author is not None:
        existing.author = changes.author
    if changes.author_email is not None:
        existing.author_email = changes.author_email
    if changes.keywords is not None:
        existing.keywords = set(changes.keywords)
    if changes.speech_date is not None:
        existing.speech_date = changes.speech_date


class SpeechService:
    """Service for managing speeches."""

    def __init__(self, store: SpeechStoreProtocol) -> None:
        """Initialize speech service.

        Args:
            store: Store for speech database operations.
        """
        self.store = store
        self._search_engine = SpeechSearchEngine(store)

    def _views(self, speeches: list[Speech]) -> list[SpeechView]:
        return [to_view(speech) for speech in speeches]

    def list_all(self) -> list[SpeechView]:
        """Get every stored speech."""
        return self._views(self.store.find_all())

    def create(self, view: SpeechView) -> SpeechView:
        """Persist a new speech. Any id on ``view`` is ignored.

        Raises:
            SpeechValidationError: If text or author is missing.
        """
        saved = self.store.save(to_record(view.model_copy(update={"id": None})))
        logger.info(f"Created speech {saved.id}")
        return to_view(saved)

    def find_by_id(self, speech_id: int) -> SpeechView | None:
        """Get a speech by id, or None if it does not exist."""
        return to_view(self.store.find_by_id(speech_id))

    def update(self, speech_id: int, changes: SpeechView) -> SpeechView | None:
        """Apply a partial update to an existing speech.

        Args:
            speech_id: The speech to update.
            changes: Fields to replace; None fields are left as they are.

        Returns:
            The updated view, or None if no speech has that id.
        """
        with self.store.transaction():
            existing = self.store.find_by_id(speech_id)
            if existing is None:
                return None
            _merge(existing, changes)
            saved = self.store.save(existing)

        logger.info(f"Updated speech {speech_id}")
        return to_view(saved)

    def delete(self, speech_id: int) -> bool:
        """Delete a speech.

        Returns:
            True if the speech existed and was removed, False otherwise.
        """
        if not self.store.exists_by_id(speech_id):
            return False
        self.store.delete_by_id(speech_id)
        logger.info(f"Deleted speech {speech_id}")
        return True

    def search(
        self,
        author: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        keyword: str | None = None,
        text: str | None = None,
    ) -> list[SpeechView]:
        """Find speeches matching every supplied criterion.

        Blank strings count as absent. With no criteria, returns everything.
        """
        criteria = SearchCriteria(
            author=author,
            date_from=date_from,
            date_to=date_to,
            keyword=keyword,
            text=text,
        )
        results = self._search_engine.search(criteria)
        logger.debug(f"Search {criteria} returned {len(results)} speeches")
        return self._views(results)
