"""Multi-criteria speech search.

Combines independent filters over the speech store:
1. Drop blank string criteria (they mean "no filter")
2. Evaluate each remaining criterion once against the whole store
3. Intersect the resulting id sets
4. Fetch the surviving speeches in a single bulk query

With no criteria at all, every speech is returned.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from speechbase.domain.models import Speech
from speechbase.domain.protocols import SpeechStoreProtocol

logger = logging.getLogger(__name__)


def _supplied(value: str | None) -> str | None:
    """Treat None, empty and whitespace-only strings alike as absent."""
    if value is None or not value.strip():
        return None
    return value


@dataclass(frozen=True)
class SearchCriteria:
    """Optional search filters. Every supplied filter must match."""

    author: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    keyword: str | None = None
    text: str | None = None

    def normalized(self) -> "SearchCriteria":
        """Return a copy with blank strings replaced by None."""
        return SearchCriteria(
            author=_supplied(self.author),
            date_from=self.date_from,
            date_to=self.date_to,
            keyword=_supplied(self.keyword),
            text=_supplied(self.text),
        )

    def is_empty(self) -> bool:
        """True when no criterion remains after blank-stripping."""
        criteria = self.normalized()
        return all(
            value is None
            for value in (
                criteria.author,
                criteria.date_from,
                criteria.date_to,
                criteria.keyword,
                criteria.text,
            )
        )


Predicate = Callable[[], list[Speech]]


class SpeechSearchEngine:
    """Evaluates SearchCriteria against a speech store."""

    def __init__(self, store: SpeechStoreProtocol) -> None:
        self.store = store

    def _predicates(self, criteria: SearchCriteria) -> list[tuple[str, Predicate]]:
        """Build one store lookup per supplied criterion.

        At most one date lookup is produced: a closed range when both bounds
        are given, otherwise the single open-ended bound.
        """
        store = self.store
        predicates: list[tuple[str, Predicate]] = []

        author, keyword, text = criteria.author, criteria.keyword, criteria.text

        if author is not None:
            predicates.append(
                ("author", lambda: store.find_by_author_containing(author))
            )

        date_from, date_to = criteria.date_from, criteria.date_to
        if date_from is not None and date_to is not None:
            predicates.append(
                ("date", lambda: store.find_by_date_between(date_from, date_to))
            )
        elif date_from is not None:
            predicates.append(
                ("date", lambda: store.find_by_date_on_or_after(date_from))
            )
        elif date_to is not None:
            predicates.append(
                ("date", lambda: store.find_by_date_on_or_before(date_to))
            )

        if keyword is not None:
            predicates.append(
                ("keyword", lambda: store.find_by_keyword_containing(keyword))
            )

        if text is not None:
            predicates.append(("text", lambda: store.find_by_text_containing(text)))

        return predicates

    def search(self, criteria: SearchCriteria) -> list[Speech]:
        """Return the speeches matching every supplied criterion.

        Args:
            criteria: Filters to apply. Blank strings count as absent.

        Returns:
            Matching speeches, deduplicated by id. Order is not significant.
        """
        predicates = self._predicates(criteria.normalized())
        if not predicates:
            return self.store.find_all()

        matching_ids: set[int] | None = None
        for name, predicate in predicates:
            ids = {speech.id for speech in predicate() if speech.id is not None}
            logger.debug(f"Search criterion '{name}' matched {len(ids)} speeches")
            matching_ids = ids if matching_ids is None else matching_ids & ids

        if not matching_ids:
            return []
        return self.store.find_all_by_id(matching_ids)
