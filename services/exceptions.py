"""
Domain exceptions for the exercise tracker.

Validators and the persistence layer raise these; the API layer maps each
kind to an HTTP status and renders the message as the response's error field.
"""


class ExerciseTrackerError(Exception):
    """Base exception for exercise tracker errors."""

    status_code = 500

    def __init__(self, message: str):
        """
        Initialize exercise tracker error.

        Args:
            message: Error description returned to the client.
        """
        self.message = message
        super().__init__(message)


class MissingFieldError(ExerciseTrackerError):
    """Raised when a required field is absent or empty."""

    status_code = 400

    def __init__(self, field: str, message: str):
        """
        Initialize missing field error.

        Args:
            field: Name of the missing field.
            message: Error description.
        """
        self.field = field
        super().__init__(message)


class InvalidFormatError(ExerciseTrackerError):
    """Raised when a field is present but malformed."""

    status_code = 400

    def __init__(self, field: str, message: str):
        """
        Initialize invalid format error.

        Args:
            field: Name of the offending field.
            message: Error description.
        """
        self.field = field
        super().__init__(message)


class UserNotFoundError(ExerciseTrackerError):
    """Raised when a user id does not match any stored user."""

    status_code = 404

    def __init__(self, user_id: str):
        """
        Initialize user not found error.

        Args:
            user_id: The id that was looked up.
        """
        self.user_id = user_id
        super().__init__("Error: User ID does not exist")


class PersistenceError(ExerciseTrackerError):
    """Raised when a read or write against the document store fails."""

    status_code = 500

    def __init__(self, message: str, reason: str = ""):
        """
        Initialize persistence error.

        Args:
            message: Error description returned to the client.
            reason: Underlying driver error, kept for logging.
        """
        self.reason = reason
        super().__init__(message)
