"""Store Protocol for speech persistence."""

from collections.abc import Iterable
from contextlib import AbstractContextManager
from datetime import date
from typing import Protocol

from speechbase.domain.models.speech import Speech


class SpeechStoreProtocol(Protocol):
    """Protocol for Speech data persistence."""

    def find_all(self) -> list[Speech]:
        """Get every stored speech, in store order."""
        ...

    def find_by_id(self, speech_id: int) -> Speech | None:
        """Get a speech by its id.

        Args:
            speech_id: The speech's identifier

        Returns:
            The Speech instance, or None if no speech has that id
        """
        ...

    def save(self, speech: Speech) -> Speech:
        """Insert or overwrite a speech.

        Args:
            speech: Speech to persist. A None id means "not yet persisted".

        Returns:
            The persisted Speech, carrying its store-assigned id
        """
        ...

    def exists_by_id(self, speech_id: int) -> bool:
        """Check if a speech exists."""
        ...

    def delete_by_id(self, speech_id: int) -> None:
        """Delete a speech and its keywords.

        Args:
            speech_id: The speech's identifier; must exist
        """
        ...

    def find_all_by_id(self, speech_ids: Iterable[int]) -> list[Speech]:
        """Get every speech whose id is in ``speech_ids`` in one query."""
        ...

    def find_by_author_containing(self, author: str) -> list[Speech]:
        """Case-insensitive substring match on the author."""
        ...

    def find_by_date_between(self, date_from: date, date_to: date) -> list[Speech]:
        """Speeches dated within [date_from, date_to], both inclusive."""
        ...

    def find_by_date_on_or_after(self, date_from: date) -> list[Speech]:
        """Speeches dated on or after ``date_from``."""
        ...

    def find_by_date_on_or_before(self, date_to: date) -> list[Speech]:
        """Speeches dated on or before ``date_to``."""
        ...

    def find_by_text_containing(self, text: str) -> list[Speech]:
        """Case-insensitive substring match on the text."""
        ...

    def find_by_keyword_containing(self, keyword: str) -> list[Speech]:
        """Speeches with at least one keyword containing ``keyword``, ignoring case."""
        ...

    def transaction(self) -> AbstractContextManager[None]:
        """Group store writes so they commit together on normal exit."""
        ...
