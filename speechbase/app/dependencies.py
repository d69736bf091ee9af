"""Dependency injection for FastAPI."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from speechbase.database import SpeechStore, get_session
from speechbase.domain_service import SpeechService


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    yield from get_session()


def get_speech_store(
    session: Annotated[Session, Depends(get_db)],
) -> SpeechStore:
    """Get speech store with injected session."""
    return SpeechStore(session)


SpeechStoreDep = Annotated[SpeechStore, Depends(get_speech_store)]


def get_speech_service(store: SpeechStoreDep) -> SpeechService:
    """Get speech service backed by the request's store."""
    return SpeechService(store)


SpeechServiceDep = Annotated[SpeechService, Depends(get_speech_service)]
