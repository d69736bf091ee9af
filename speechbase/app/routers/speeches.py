"""Speech CRUD and search routes."""

from datetime import date
from typing import Annotated, Any

from fastapi import APIRouter, Path, Query, Response, status
from pydantic import BeforeValidator

from speechbase.app.dependencies import SpeechServiceDep
from speechbase.domain.models import SpeechView
from speechbase.domain_service import SpeechNotFoundError

router = APIRouter(prefix="/api/speeches", tags=["speeches"])

# Ids are 64-bit; anything wider is rejected as a bad request
SpeechId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


def _empty_as_none(value: Any) -> Any:
    """An empty ``?from=`` or ``?to=`` means no bound."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalDate = Annotated[date | None, BeforeValidator(_empty_as_none)]


@router.get("", response_model=list[SpeechView])
def list_speeches(service: SpeechServiceDep) -> list[SpeechView]:
    """List every speech."""
    return service.list_all()


# Registered before /{speech_id} so "search" is never parsed as an id.
@router.get("/search", response_model=list[SpeechView])
def search_speeches(
    service: SpeechServiceDep,
    author: str | None = None,
    date_from: Annotated[OptionalDate, Query(alias="from")] = None,
    date_to: Annotated[OptionalDate, Query(alias="to")] = None,
    keyword: str | None = None,
    text: str | None = None,
) -> list[SpeechView]:
    """Find speeches matching every supplied filter."""
    return service.search(
        author=author,
        date_from=date_from,
        date_to=date_to,
        keyword=keyword,
        text=text,
    )


@router.get("/{speech_id}", response_model=SpeechView)
def get_speech(speech_id: SpeechId, service: SpeechServiceDep) -> SpeechView:
    speech = service.find_by_id(speech_id)
    if speech is None:
        raise SpeechNotFoundError(speech_id)
    return speech


@router.post("", response_model=SpeechView)
def create_speech(view: SpeechView, service: SpeechServiceDep) -> SpeechView:
    return service.create(view)


@router.put("/{speech_id}", response_model=SpeechView)
def update_speech(
    speech_id: SpeechId, changes: SpeechView, service: SpeechServiceDep
) -> SpeechView:
    """Partially update a speech; omitted or null fields stay unchanged."""
    updated = service.update(speech_id, changes)
    if updated is None:
        raise SpeechNotFoundError(speech_id)
    return updated


@router.delete("/{speech_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_speech(speech_id: SpeechId, service: SpeechServiceDep) -> Response:
    if not service.delete(speech_id):
        raise SpeechNotFoundError(speech_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
