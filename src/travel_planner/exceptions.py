"""Custom exceptions for the travel planner backend."""


class MissingCredentialsError(Exception):
    """Raised when speech vendor credentials are not configured."""

    def __init__(self, vendor: str):
        self.vendor = vendor
        super().__init__(f"Credentials for '{vendor}' are not configured")


class TempStorageError(Exception):
    """Raised when writing a per-request scratch file fails."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write temporary file '{path}'")


class TranscodeError(Exception):
    """Raised when converting uploaded audio to PCM fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to transcode audio file '{file_name}'")


class TranscriptionError(Exception):
    """Base class for failures of a streaming transcription session."""


class SpeechConnectionError(TranscriptionError):
    """Raised when the vendor socket cannot be opened or drops abnormally."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class VendorRecognitionError(TranscriptionError):
    """Raised when the vendor answers with a nonzero error code."""

    def __init__(self, code: int, message: str | None, sid: str | None = None):
        self.code = code
        self.vendor_message = message
        self.sid = sid
        super().__init__(f"Vendor error {code}: {message}")


class TranscriptionTimeoutError(TranscriptionError):
    """Raised when a session exceeds its maximum duration."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Transcription did not finish within {timeout_seconds}s")


class LLMServiceError(Exception):
    """Raised when the LLM call fails or returns an unusable reply."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class CacheServiceError(Exception):
    """Raised when the plan cache cannot be read or written."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        self.cause = cause
        super().__init__(f"Cache {operation} failed for key '{key}'")


class PersistenceError(Exception):
    """Raised when a database read or write fails."""

    def __init__(self, entity: str, cause: Exception | None = None):
        self.entity = entity
        self.cause = cause
        super().__init__(str(cause) if cause else f"Failed to persist {entity}")


class ItineraryNotFoundError(Exception):
    """Raised when a requested itinerary does not exist."""

    def __init__(self, itinerary_id: int):
        self.itinerary_id = itinerary_id
        super().__init__(f"Itinerary {itinerary_id} not found")
