"""Database stores."""

from speechbase.database.stores.speech_store import SpeechStore

__all__ = ["SpeechStore"]
