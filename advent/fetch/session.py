"""
Session token handling.

The remote site authenticates with a ``session`` cookie. The token is stored
verbatim in a plaintext file under the cache directory. When the file is
missing the operator is asked for it once and it is persisted for later runs.
"""

import errno
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..config import CACHE_DIR, SESSION_FILENAME
from ..log import scoped
from .errors import SessionError

logger = logging.getLogger(__name__)

Prompt = Callable[[], Optional[str]]


def session_file_for(cache_dir: Path) -> Path:
    """Location of the token file for a cache directory."""
    return Path(cache_dir) / SESSION_FILENAME


def _describe_os_error(e: OSError) -> str:
    if isinstance(e, PermissionError):
        return "the program doesn't have permissions"
    if e.errno == errno.ENAMETOOLONG:
        return "the path would be too long"
    return "an unexpected error occurred"


@dataclass(frozen=True)
class Environment:
    """Process-wide cache root and session token."""
    cache_dir: Path
    session: str

    @property
    def session_file(self) -> Path:
        return session_file_for(self.cache_dir)

    @classmethod
    def initialise(
        cls,
        cache_dir: Path = CACHE_DIR,
        prompt: Optional[Prompt] = None,
    ) -> "Environment":
        """
        Create the cache directory and load the session token.

        Args:
            cache_dir: Directory holding cached inputs and the token file
            prompt: Called when no token is stored; returns the token or None

        Raises:
            SessionError: the directory or token file is unusable, or no
                token was supplied
        """
        log = scoped(logger, "[Env]")
        cache_dir = Path(cache_dir)

        try:
            log.debug("Creating directory %s", cache_dir)
            cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.error("Couldn't create cache directory", exc_info=True)
            raise SessionError(
                f"Unable to create {cache_dir} because {_describe_os_error(e)}. "
                "Please check directory permissions or choose another cache directory."
            ) from e

        session_file = session_file_for(cache_dir)
        try:
            log.debug("Attempting to read session file %s", session_file)
            session = session_file.read_text().strip()
        except FileNotFoundError:
            log.info("No session file found, prompting for one")
            session = _ask_for_session(prompt)
            _store_session(session_file, session)
        except OSError as e:
            log.error("Couldn't read session file", exc_info=True)
            raise SessionError(
                f"Unable to read the session file {session_file} because "
                f"{_describe_os_error(e)}. Please check file permissions."
            ) from e

        if not session:
            raise SessionError(
                f"The session file {session_file} is empty. "
                "Please delete it and run the program again."
            )
        return cls(cache_dir=cache_dir, session=session)


def _ask_for_session(prompt: Optional[Prompt]) -> str:
    answer = prompt() if prompt is not None else None
    if not answer or not answer.strip():
        logger.error("No session cookie was entered")
        raise SessionError(
            "You didn't enter your session cookie, so the program is unable "
            "to download your puzzle inputs."
        )
    return answer.strip()


def _store_session(session_file: Path, session: str) -> None:
    try:
        logger.debug("Storing session in %s", session_file)
        session_file.write_text(session)
    except OSError as e:
        logger.error("Couldn't store session file", exc_info=True)
        raise SessionError(
            f"Couldn't save the session cookie in {session_file} because "
            f"{_describe_os_error(e)}."
        ) from e


def forget_session(cache_dir: Path = CACHE_DIR) -> bool:
    """Delete the stored token. Returns True if a file was removed."""
    session_file = session_file_for(cache_dir)
    try:
        session_file.unlink()
    except FileNotFoundError:
        return False
    logger.info("Removed session file %s", session_file)
    return True
