"""Database models (SQLModel)."""

from datetime import UTC, date, datetime

from sqlalchemy import Text
from sqlmodel import Field, Relationship, SQLModel


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


class SpeechModel(SQLModel, table=True):
    """Speech row. Keywords live in their own table."""

    __tablename__ = "speeches"  # pyright: ignore[reportAssignmentType]

    id: int | None = Field(default=None, primary_key=True)
    text: str = Field(sa_type=Text)
    author: str = Field(index=True, max_length=255)
    author_email: str | None = Field(default=None, max_length=255)
    speech_date: date | None = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    keywords: list["SpeechKeywordModel"] = Relationship(
        back_populates="speech",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "lazy": "selectin"},
    )


class SpeechKeywordModel(SQLModel, table=True):
    """One keyword of one speech; the composite key keeps keywords unique per speech."""

    __tablename__ = "speech_keywords"  # pyright: ignore[reportAssignmentType]

    speech_id: int | None = Field(
        default=None, foreign_key="speeches.id", primary_key=True
    )
    keyword: str = Field(primary_key=True, max_length=255)

    speech: "SpeechModel" = Relationship(back_populates="keywords")
