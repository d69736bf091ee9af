"""Database layer."""

from speechbase.database.session import get_session
from speechbase.database.stores import SpeechStore

__all__ = ["get_session", "SpeechStore"]
