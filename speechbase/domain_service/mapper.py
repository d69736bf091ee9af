"""Translation between SpeechView and the Speech entity."""

from typing import overload

from speechbase.domain.models import Speech, SpeechView


@overload
def to_view(speech: Speech) -> SpeechView: ...
@overload
def to_view(speech: None) -> None: ...
def to_view(speech: Speech | None) -> SpeechView | None:
    """Project a speech onto its wire view. Keywords become a sorted list."""
    if speech is None:
        return None
    return SpeechView(
        id=speech.id,
        text=speech.text,
        author=speech.author,
        author_email=speech.author_email,
        keywords=sorted(speech.keywords or ()),
        speech_date=speech.speech_date,
    )


@overload
def to_record(view: SpeechView) -> Speech: ...
@overload
def to_record(view: None) -> None: ...
def to_record(view: SpeechView | None) -> Speech | None:
    """Build a speech from a view.

    Duplicate keywords collapse and a missing keyword list becomes an empty
    set. The id is copied as is, so None still means "not yet persisted".
    """
    if view is None:
        return None
    return Speech(
        id=view.id,
        text=view.text,
        author=view.author,
        author_email=view.author_email,
        keywords=set(view.keywords or ()),
        speech_date=view.speech_date,
    )
