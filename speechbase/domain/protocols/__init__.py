"""Domain protocols."""

from speechbase.domain.protocols.store import SpeechStoreProtocol

__all__ = ["SpeechStoreProtocol"]
