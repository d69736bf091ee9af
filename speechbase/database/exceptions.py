"""Database exceptions."""


class DatabaseError(Exception):
    """Base exception for database operations."""

    pass


class SpeechValidationError(DatabaseError):
    """Raised when a speech is missing a required field at persistence time."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Speech field '{field_name}' must not be null")


class SpeechNotFoundInStoreError(DatabaseError):
    """Raised when deleting a speech that does not exist."""

    pass
