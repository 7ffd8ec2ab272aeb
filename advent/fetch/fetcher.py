"""
Input fetcher with a local file cache.

Cache policy:
1. Read ``<cache_dir>/<group>-<unit>``. A hit is always trusted.
2. Only a missing file falls through to the network. Any other read failure
   is fatal, since it would most likely also block writing the cache.
3. One authenticated GET per miss, no retries.
4. A successful download is written back to the cache. If that write fails
   the download is still reported as a failure (CachePersistFailure, with the
   bytes attached) so the cache never silently stays empty.
"""

import errno
import logging
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from ..config import HTTP_TIMEOUT_SECONDS, REMOTE_HOST
from ..log import scoped
from .errors import (
    ArtifactNotAvailable,
    CachePersistFailure,
    CacheReadFailure,
    InvalidCredential,
    NetworkUnavailable,
    UnexpectedResponse,
)
from .session import Environment

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session"


@dataclass(frozen=True)
class ArtifactKey:
    """Identifies one puzzle input: a group (year) and a unit (day)."""
    group: str
    unit: int

    @property
    def cache_name(self) -> str:
        return f"{self.group}-{self.unit}"


class ArtifactFetcher:
    """
    Resolves puzzle inputs from the cache or the remote site.

    The HTTP client is owned by the fetcher and released by ``close()``; use
    the fetcher as a context manager:

        with ArtifactFetcher(env) as fetcher:
            data = fetcher.fetch(ArtifactKey("2015", 1))
    """

    def __init__(
        self,
        env: Environment,
        host: str = REMOTE_HOST,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        client: Optional[httpx.Client] = None,
    ):
        self.env = env
        self.host = host
        if client is None:
            client = httpx.Client(timeout=timeout)
        self._client = client
        self._closed = False

    def __enter__(self) -> "ArtifactFetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if not self._closed:
            self._client.close()
            self._closed = True

    def cache_path(self, key: ArtifactKey) -> Path:
        return self.env.cache_dir / key.cache_name

    def url(self, key: ArtifactKey) -> str:
        return f"https://{self.host}/{key.group}/day/{key.unit}/input"

    def fetch(self, key: ArtifactKey) -> bytes:
        """
        Get the input for ``key``.

        Raises:
            InputError: one of its subclasses, see ``advent.fetch.errors``
        """
        log = scoped(logger, "[InputFetcher]")
        log.debug("Fetching input for %s day %d", key.group, key.unit)
        path = self.cache_path(key)

        try:
            content = self._read_cache(path, log)
        except FileNotFoundError:
            log.debug("Trying from website")
            content = self._download(key, log)
            self._write_cache(path, content, log)

        log.debug("Success")
        return content

    def fetch_text(self, key: ArtifactKey) -> str:
        """
        Get the input for ``key`` as UTF-8 text.

        Raises:
            CacheReadFailure: the cached bytes are not valid UTF-8
        """
        content = self.fetch(key)
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            path = self.cache_path(key)
            logger.error("Cached input %s is not UTF-8", path, exc_info=True)
            raise CacheReadFailure(
                f"The input cached in {path} is not valid UTF-8 text. "
                "Please delete it and run the program again.",
                path,
            ) from e

    def _read_cache(self, path: Path, log) -> bytes:
        try:
            log.debug("Attempting to read from %s", path)
            return path.read_bytes()
        except FileNotFoundError:
            log.debug("File not found")
            raise
        except PermissionError as e:
            log.error("Unauthorized", exc_info=True)
            raise CacheReadFailure(
                f"Couldn't read input from {path} due to a permissions issue. "
                "Please check directory/file permissions.",
                path,
            ) from e
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                log.error("Path too long", exc_info=True)
                message = (
                    f"Couldn't read input from {path} because the path is too long. "
                    "Please use a shorter cache directory."
                )
            else:
                log.error("Unexpected exception", exc_info=True)
                message = f"Couldn't read input from {path} due to an unexpected error."
            raise CacheReadFailure(message, path) from e

    def _download(self, key: ArtifactKey, log) -> bytes:
        url = self.url(key)
        try:
            log.debug("Attempting to fetch from %s", url)
            # Session goes on this request only, not into the client cookie jar.
            cookie = f"{SESSION_COOKIE}={self.env.session}"
            response = self._client.get(url, headers={"Cookie": cookie})
        except httpx.TransportError as e:
            log.error("HTTP transport error", exc_info=True)
            raise NetworkUnavailable(key, self.host) from e

        if response.is_success:
            return response.content
        if response.status_code == 404:
            log.warning("Day not available yet")
            raise ArtifactNotAvailable(key)
        if response.status_code == 400:
            log.error("Stored session is invalid")
            raise InvalidCredential(self.env.session_file)
        log.error("Received error code %d", response.status_code)
        raise UnexpectedResponse(key, response.status_code, self.env.session_file)

    def _write_cache(self, path: Path, content: bytes, log) -> None:
        partial = path.with_name(path.name + ".part")
        try:
            log.debug("Attempting to store downloaded input in %s", path)
            partial.write_bytes(content)
            partial.replace(path)
        except OSError as e:
            log.error("Couldn't store input", exc_info=True)
            with suppress(OSError):
                partial.unlink()
            if isinstance(e, PermissionError):
                reason = "the program doesn't have permissions to create it"
            elif e.errno == errno.ENAMETOOLONG:
                reason = "the path is too long"
            else:
                reason = "of an unexpected error"
            raise CachePersistFailure(
                f"Couldn't save an input file. Input was successfully downloaded, "
                f"but it could not be written to {path} because {reason}.",
                path,
                content,
            ) from e
