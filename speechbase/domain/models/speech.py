"""Speech domain model."""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class Speech:
    """Speech entity: free text plus author, keywords and date.

    ``id`` stays ``None`` until the store persists the speech for the first time.
    """

    text: str | None
    author: str | None
    author_email: str | None = None
    keywords: set[str] = field(default_factory=set)
    speech_date: date | None = None
    id: int | None = None
