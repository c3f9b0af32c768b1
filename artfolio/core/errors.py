"""
Domain errors.

Every failure the gallery reports to a client is an ``ArtfolioError`` carrying
a human readable message and the HTTP status it maps to. The server registers
a single handler for the whole hierarchy.
"""

from __future__ import annotations


class ArtfolioError(Exception):
    """Base class for errors reported back to the client."""

    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ArtfolioError):
    status_code = 400
    default_message = "Invalid input."


class PayloadTooLargeError(ArtfolioError):
    status_code = 413
    default_message = "File is too large."


class AuthenticationError(ArtfolioError):
    status_code = 401
    default_message = "Invalid secret key."


class AdminDisabledError(ArtfolioError):
    status_code = 403
    default_message = "Admin access is not configured."


class ArtworkNotFoundError(ArtfolioError):
    status_code = 404

    def __init__(self, artwork_id: int) -> None:
        self.artwork_id = artwork_id
        super().__init__(f"Artwork {artwork_id} not found")


class StorageError(ArtfolioError):
    """Raised when the storage backend cannot store or delete a file."""

    status_code = 502
    default_message = "Upload failed. Please try again."


class DescriptionUnavailableError(ArtfolioError):
    status_code = 503
    default_message = "AI description generation is not available."


class DescriptionGenerationError(ArtfolioError):
    status_code = 502
    default_message = "Failed to generate a description."
