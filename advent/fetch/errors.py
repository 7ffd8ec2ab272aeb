"""Errors raised while acquiring puzzle input."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .fetcher import ArtifactKey


class InputError(Exception):
    """Base exception for input acquisition failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SessionError(InputError):
    """The session token could not be loaded or stored."""
    pass


class CacheReadFailure(InputError):
    """A cached input exists but could not be read."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(message)


class ArtifactNotAvailable(InputError):
    """The remote source has no input for this day yet."""

    def __init__(self, key: "ArtifactKey"):
        self.key = key
        super().__init__(
            f"Day {key.unit} of {key.group} isn't available yet. "
            "Please don't run every day until the season is completed."
        )


class InvalidCredential(InputError):
    """The remote source rejected the stored session token."""

    def __init__(self, session_file: Path):
        self.session_file = session_file
        super().__init__(
            f"The stored session cookie is invalid. "
            f"Please delete {session_file} and run the program again."
        )


class UnexpectedResponse(InputError):
    """Any other non-success status from the remote source."""

    def __init__(self, key: "ArtifactKey", status_code: int, session_file: Path):
        self.key = key
        self.status_code = status_code
        self.session_file = session_file
        super().__init__(
            f"Received unexpected response code {status_code} while attempting "
            f"to download input for day {key.unit}. "
            f"Try deleting {session_file} and run the program again."
        )


class NetworkUnavailable(InputError):
    """The request never produced a response."""

    def __init__(self, key: "ArtifactKey", host: str):
        self.key = key
        super().__init__(
            f"Couldn't download the input for day {key.unit} from {host}. "
            "Check your Internet connection."
        )


class CachePersistFailure(InputError):
    """Input was downloaded but could not be written to the cache."""

    def __init__(self, message: str, path: Path, content: bytes):
        self.path = path
        self.content = content
        super().__init__(message)
