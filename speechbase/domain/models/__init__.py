"""Domain models."""

from speechbase.domain.models.speech import Speech
from speechbase.domain.models.view import SpeechView

__all__ = ["Speech", "SpeechView"]
