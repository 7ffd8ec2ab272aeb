"""Puzzle input acquisition: session token, cache and remote fetch."""

from .errors import (
    ArtifactNotAvailable,
    CachePersistFailure,
    CacheReadFailure,
    InputError,
    InvalidCredential,
    NetworkUnavailable,
    SessionError,
    UnexpectedResponse,
)
from .fetcher import ArtifactFetcher, ArtifactKey
from .session import Environment, forget_session, session_file_for

__all__ = [
    "ArtifactFetcher",
    "ArtifactKey",
    "ArtifactNotAvailable",
    "CachePersistFailure",
    "CacheReadFailure",
    "Environment",
    "InputError",
    "InvalidCredential",
    "NetworkUnavailable",
    "SessionError",
    "UnexpectedResponse",
    "forget_session",
    "session_file_for",
]
