"""Speech store for database operations."""

from collections.abc import Generator, Iterable
from contextlib import contextmanager
from datetime import UTC, date, datetime

from sqlmodel import Session, col, select
from sqlmodel.sql.expression import SelectOfScalar

from speechbase.database.exceptions import (
    SpeechNotFoundInStoreError,
    SpeechValidationError,
)
from speechbase.database.models import SpeechKeywordModel, SpeechModel
from speechbase.domain.models import Speech


class SpeechStore:
    """Store for Speech database operations.

    Implements SpeechStoreProtocol from speechbase.domain.protocols.store.
    Every write commits immediately unless it runs inside ``transaction()``.
    """

    def __init__(self, session: Session) -> None:
        """Initialize store with a database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self._transaction_depth = 0

    def _to_domain_speech(self, model: SpeechModel) -> Speech:
        """Convert database model to domain model."""
        return Speech(
            id=model.id,
            text=model.text,
            author=model.author,
            author_email=model.author_email,
            keywords={kw.keyword for kw in model.keywords},
            speech_date=model.speech_date,
        )

    def _fetch(self, statement: SelectOfScalar[SpeechModel]) -> list[Speech]:
        return [self._to_domain_speech(m) for m in self.session.exec(statement).all()]

    def _commit(self) -> None:
        if self._transaction_depth:
            self.session.flush()
        else:
            self.session.commit()

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Defer commits until the outermost block exits.

        Raises:
            Whatever the block raises, after rolling the session back.
        """
        self._transaction_depth += 1
        try:
            yield
        except Exception:
            self.session.rollback()
            raise
        else:
            if self._transaction_depth == 1:
                self.session.commit()
        finally:
            self._transaction_depth -= 1

    def find_all(self) -> list[Speech]:
        """Get all speeches ordered by id."""
        return self._fetch(select(SpeechModel).order_by(col(SpeechModel.id)))

    def find_by_id(self, speech_id: int) -> Speech | None:
        """Get a speech by id.

        Args:
            speech_id: The speech's identifier

        Returns:
            The Speech instance, or None if not found
        """
        model = self.session.get(SpeechModel, speech_id)
        if model is None:
            return None
        return self._to_domain_speech(model)

    def save(self, speech: Speech) -> Speech:
        """Insert a new speech or overwrite an existing one.

        A speech whose id is None, or whose id is no longer stored, is
        inserted under a freshly assigned id. Otherwise the stored row is
        overwritten and its keyword set replaced.

        Args:
            speech: The speech to persist

        Returns:
            The persisted Speech with its id

        Raises:
            SpeechValidationError: If text or author is None
        """
        if speech.text is None:
            raise SpeechValidationError("text")
        if speech.author is None:
            raise SpeechValidationError("author")

        model = None
        if speech.id is not None:
            model = self.session.get(SpeechModel, speech.id)

        if model is None:
            model = SpeechModel(
                text=speech.text,
                author=speech.author,
                author_email=speech.author_email,
                speech_date=speech.speech_date,
            )
        else:
            model.text = speech.text
            model.author = speech.author
            model.author_email = speech.author_email
            model.speech_date = speech.speech_date
            model.updated_at = datetime.now(UTC)

        self._replace_keywords(model, speech.keywords)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_domain_speech(model)

    def _replace_keywords(self, model: SpeechModel, keywords: Iterable[str]) -> None:
        # Reuse rows for surviving keywords so the flush never inserts a
        # (speech_id, keyword) pair that is still pending deletion.
        current = {kw.keyword: kw for kw in model.keywords}
        model.keywords = [
            current.get(keyword) or SpeechKeywordModel(keyword=keyword)
            for keyword in sorted(set(keywords))
        ]

    def exists_by_id(self, speech_id: int) -> bool:
        """Check if a speech exists.

        Args:
            speech_id: The speech's identifier

        Returns:
            True if speech exists, False otherwise
        """
        statement = select(SpeechModel.id).where(SpeechModel.id == speech_id)
        return self.session.exec(statement).first() is not None

    def delete_by_id(self, speech_id: int) -> None:
        """Delete a speech and its keywords.

        Args:
            speech_id: The speech's identifier

        Raises:
            SpeechNotFoundInStoreError: If speech not found
        """
        model = self.session.get(SpeechModel, speech_id)
        if model is None:
            raise SpeechNotFoundInStoreError(f"Speech '{speech_id}' not found")

        self.session.delete(model)
        self._commit()

    def find_all_by_id(self, speech_ids: Iterable[int]) -> list[Speech]:
        """Get all speeches whose id is in speech_ids."""
        ids = list(speech_ids)
        if not ids:
            return []
        statement = (
            select(SpeechModel)
            .where(col(SpeechModel.id).in_(ids))
            .order_by(col(SpeechModel.id))
        )
        return self._fetch(statement)

    def find_by_author_containing(self, author: str) -> list[Speech]:
        statement = select(SpeechModel).where(
            col(SpeechModel.author).icontains(author, autoescape=True)
        )
        return self._fetch(statement)

    def find_by_date_between(self, date_from: date, date_to: date) -> list[Speech]:
        statement = select(SpeechModel).where(
            col(SpeechModel.speech_date).between(date_from, date_to)
        )
        return self._fetch(statement)

    def find_by_date_on_or_after(self, date_from: date) -> list[Speech]:
        statement = select(SpeechModel).where(col(SpeechModel.speech_date) >= date_from)
        return self._fetch(statement)

    def find_by_date_on_or_before(self, date_to: date) -> list[Speech]:
        statement = select(SpeechModel).where(col(SpeechModel.speech_date) <= date_to)
        return self._fetch(statement)

    def find_by_text_containing(self, text: str) -> list[Speech]:
        statement = select(SpeechModel).where(
            col(SpeechModel.text).icontains(text, autoescape=True)
        )
        return self._fetch(statement)

    def find_by_keyword_containing(self, keyword: str) -> list[Speech]:
        """Speeches with any keyword containing ``keyword``, each returned once."""
        matching_ids = select(SpeechKeywordModel.speech_id).where(
            col(SpeechKeywordModel.keyword).icontains(keyword, autoescape=True)
        )
        statement = select(SpeechModel).where(col(SpeechModel.id).in_(matching_ids))
        return self._fetch(statement)
