"""Tests for SpeechService."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from speechbase.database.exceptions import SpeechValidationError
from speechbase.domain.models import Speech, SpeechView
from speechbase.domain_service import SpeechService


@pytest.fixture
def existing(service: SpeechService) -> SpeechView:
    """A stored speech to update and delete."""
    return service.create(
        SpeechView(
            text="Original text",
            author="John Doe",
            author_email="john@example.com",
            keywords=["a", "b"],
            speech_date=date(2024, 1, 15),
        )
    )


class TestListAll:
    """Tests for list_all method."""

    def test_empty(self, service: SpeechService) -> None:
        assert service.list_all() == []

    def test_returns_every_speech(self, service: SpeechService, sample_speeches) -> None:
        views = service.list_all()

        assert {v.id for v in views} == {s.id for s in sample_speeches.values()}


class TestCreate:
    """Tests for create method."""

    def test_create_with_all_fields(self, existing: SpeechView) -> None:
        assert existing.id is not None
        assert existing.text == "Original text"
        assert existing.author_email == "john@example.com"
        assert sorted(existing.keywords or []) == ["a", "b"]
        assert existing.speech_date == date(2024, 1, 15)

    def test_create_minimal(self, service: SpeechService) -> None:
        created = service.create(SpeechView(text="Text only", author="Anon"))

        assert created.text == "Text only"
        assert created.author_email is None
        assert created.keywords == []
        assert created.speech_date is None

    def test_create_ignores_supplied_id(self, service: SpeechService) -> None:
        first = service.create(SpeechView(id=500, text="t", author="a"))
        second = service.create(SpeechView(id=500, text="t", author="a"))

        assert first.id != second.id
        assert service.find_by_id(500) is None

    def test_create_collapses_duplicate_keywords(self, service: SpeechService) -> None:
        created = service.create(
            SpeechView(text="t", author="a", keywords=["x", "y", "x"])
        )

        assert sorted(created.keywords or []) == ["x", "y"]

    def test_create_without_author_raises(self, service: SpeechService) -> None:
        with pytest.raises(SpeechValidationError):
            service.create(SpeechView(text="t"))

    def test_create_saves_record_and_returns_its_view(self) -> None:
        store = MagicMock()
        store.save.side_effect = lambda speech: Speech(
            id=7, text=speech.text, author=speech.author, keywords=speech.keywords
        )

        created = SpeechService(store).create(
            SpeechView(id=3, text="t", author="a", keywords=["k"])
        )

        saved = store.save.call_args.args[0]
        assert isinstance(saved, Speech)
        assert saved.id is None
        assert created == SpeechView(id=7, text="t", author="a", keywords=["k"])


class TestFindById:
    """Tests for find_by_id method."""

    def test_found(self, service: SpeechService, existing: SpeechView) -> None:
        assert service.find_by_id(existing.id) == existing  # type: ignore[arg-type]

    def test_absent(self, service: SpeechService) -> None:
        assert service.find_by_id(999) is None


class TestUpdate:
    """Tests for update method."""

    def test_update_all_fields(self, service: SpeechService, existing: SpeechView) -> None:
        updated = service.update(
            existing.id,  # type: ignore[arg-type]
            SpeechView(
                text="New text",
                author="New Author",
                author_email="new@example.com",
                keywords=["z"],
                speech_date=date(2025, 5, 5),
            ),
        )

        assert updated is not None
        assert updated.id == existing.id
        assert updated.text == "New text"
        assert updated.author == "New Author"
        assert updated.author_email == "new@example.com"
        assert updated.keywords == ["z"]
        assert updated.speech_date == date(2025, 5, 5)

    def test_update_only_text(self, service: SpeechService, existing: SpeechView) -> None:
        updated = service.update(existing.id, SpeechView(text="New text only"))  # type: ignore[arg-type]

        assert updated is not None
        assert updated.text == "New text only"
        assert updated.author == existing.author
        assert updated.speech_date == existing.speech_date

    def test_all_null_changes_nothing(
        self, service: SpeechService, existing: SpeechView
    ) -> None:
        updated = service.update(existing.id, SpeechView())  # type: ignore[arg-type]

        assert updated == existing
        assert service.find_by_id(existing.id) == existing  # type: ignore[arg-type]

    def test_keywords_are_replaced_not_merged(
        self, service: SpeechService, existing: SpeechView
    ) -> None:
        updated = service.update(existing.id, SpeechView(keywords=["x"]))  # type: ignore[arg-type]

        assert updated is not None
        assert updated.keywords == ["x"]

    def test_keywords_can_be_cleared(
        self, service: SpeechService, existing: SpeechView
    ) -> None:
        updated = service.update(existing.id, SpeechView(keywords=[]))  # type: ignore[arg-type]

        assert updated is not None
        assert updated.keywords == []

    def test_keywords_overlapping_old_set(
        self, service: SpeechService, existing: SpeechView
    ) -> None:
        updated = service.update(existing.id, SpeechView(keywords=["b", "c"]))  # type: ignore[arg-type]

        assert updated is not None
        assert sorted(updated.keywords or []) == ["b", "c"]

    def test_update_absent_returns_none(self, service: SpeechService) -> None:
        assert service.update(999, SpeechView(text="x")) is None
        assert service.list_all() == []

    def test_update_persists(self, service: SpeechService, existing: SpeechView) -> None:
        service.update(existing.id, SpeechView(author="Someone Else"))  # type: ignore[arg-type]

        stored = service.find_by_id(existing.id)  # type: ignore[arg-type]
        assert stored is not None
        assert stored.author == "Someone Else"


class TestDelete:
    """Tests for delete method."""

    def test_delete_exactly_once(
        self, service: SpeechService, existing: SpeechView
    ) -> None:
        assert service.delete(existing.id) is True  # type: ignore[arg-type]
        assert service.delete(existing.id) is False  # type: ignore[arg-type]
        assert service.find_by_id(existing.id) is None  # type: ignore[arg-type]

    def test_delete_absent(self, service: SpeechService) -> None:
        assert service.delete(999) is False


class TestSearch:
    """Tests for search method."""

    def test_blank_search_equals_list_all(
        self, service: SpeechService, sample_speeches
    ) -> None:
        blank = service.search("", None, None, "", "")
        unfiltered = service.search()

        assert {v.id for v in blank} == {v.id for v in service.list_all()}
        assert {v.id for v in unfiltered} == {v.id for v in service.list_all()}

    def test_author_and_keyword(self, service: SpeechService, sample_speeches) -> None:
        result = service.search(author="john", keyword="tech")

        assert {v.author for v in result} == {"John Doe", "John Miller"}

    def test_no_match_is_empty_list(self, service: SpeechService, sample_speeches) -> None:
        assert service.search(author="john", keyword="climate") == []

    def test_date_range(self, service: SpeechService, sample_speeches) -> None:
        result = service.search(date_from=date(2024, 2, 1), date_to=date(2024, 2, 28))

        assert [v.author for v in result] == ["Jane Smith"]
