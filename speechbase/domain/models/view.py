"""Wire-facing projection of a speech."""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SpeechView(BaseModel):
    """Speech as exchanged with API clients.

    Every field is optional so the same shape serves creation, partial
    updates and responses. ``keywords`` is a list on the wire; its order
    carries no meaning.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int | None = None
    text: str | None = None
    author: str | None = None
    author_email: str | None = None
    keywords: list[str] | None = None
    speech_date: date | None = None
