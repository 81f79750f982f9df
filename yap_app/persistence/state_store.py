"""JSON state file store for the pomodoro timer."""

import fcntl
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from ..errors import PersistenceError
from ..logging.config import get_logger
from ..state.models import TimerState
from .codec import dumps, loads


class StateFileStore:
    """Reads and writes one timer record at ``path``."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self.lock_path = self.path.with_name(self.path.name + ".lock")
        self.logger = get_logger("yap.store")

    def exists(self) -> bool:
        """True when a regular state file is present."""
        try:
            return self.path.is_file()
        except OSError as e:
            raise self._read_error(e) from e

    def read(self) -> Optional[TimerState]:
        """
        Load the stored record.

        Returns:
            The record, or None when no state file exists

        Raises:
            PersistenceError: If the file exists but cannot be read
            MalformedDataError: If the file does not hold a valid record
        """
        if not self.exists():
            try:
                present = self.path.exists()
            except OSError as e:
                raise self._read_error(e) from e
            if present:
                raise PersistenceError(
                    f"State path is not a regular file: {self.path}",
                    operation="read",
                    target=str(self.path)
                )
            self.logger.debug("No state file", path=str(self.path))
            return None

        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise self._read_error(e) from e

        record = loads(text)
        self.logger.debug("State file read", path=str(self.path), record=record)
        return record

    def write(self, state: TimerState) -> None:
        """
        Replace the stored record atomically.

        The record is written to a temporary file in the same directory and
        renamed over the target, so readers see either the old or the new
        record and never a partial one.

        Raises:
            PersistenceError: If the file cannot be written
        """
        payload = dumps(state)
        tmp_name: Optional[str] = None

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(
                f"Cannot write state file {self.path}: {e}",
                operation="write",
                target=str(self.path)
            ) from e
        finally:
            if tmp_name is not None:
                self._discard(tmp_name)

        self.logger.debug("State file written", path=str(self.path), record=payload)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """
        Hold an exclusive advisory lock for one read-modify-write cycle.

        The lock lives on a sidecar ``<path>.lock`` file because the state
        file itself is replaced on every write.
        """
        try:
            self.lock_path.parent.mkdir(parents=True, exist_ok=True)
            lock_file = open(self.lock_path, "a")
        except OSError as e:
            raise PersistenceError(
                f"Cannot open lock file {self.lock_path}: {e}",
                operation="lock",
                target=str(self.lock_path)
            ) from e

        with lock_file:
            try:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            except OSError as e:
                raise PersistenceError(
                    f"Cannot lock {self.lock_path}: {e}",
                    operation="lock",
                    target=str(self.lock_path)
                ) from e
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def _read_error(self, error: Exception) -> PersistenceError:
        return PersistenceError(
            f"Cannot read state file {self.path}: {error}",
            operation="read",
            target=str(self.path)
        )

    def _discard(self, name: Any) -> None:
        try:
            os.unlink(name)
        except OSError as e:
            self.logger.warning("Could not remove temporary file", path=str(name), error=str(e))
