"""
JSON file Session Store Implementation.

Stores every session record in a single JSON document keyed by session key.
Writes go to a temporary file that is then renamed over the original, so a
crash mid-write never leaves a half-written document behind.
"""
import json
import logging
import os
import pathlib
import tempfile
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)


class JsonFileSessionStore:
    """
    Local-file implementation of SessionStore.

    Suitable for a single hosting process; the file is re-read on every
    load so a restarted process sees the latest records.
    """

    def __init__(self, path: Union[str, pathlib.Path]):
        """
        Initialize with the path of the JSON document.

        Args:
            path: File holding all session records (created on first save)
        """
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def _read_all(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading session file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Session file {self._path} does not hold a JSON object")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            pathlib.Path(tmp_name).unlink(missing_ok=True)
            raise

    # =========================================================================
    # SessionStore Protocol Methods
    # =========================================================================

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        """Load the stored record for a session."""
        record = self._read_all().get(session_key)
        return record if isinstance(record, dict) else None

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        """Store the record for a session."""
        try:
            data = self._read_all()
            data[session_key] = record
            self._write_all(data)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving session '{session_key}' to {self._path}: {e}")
            return False

    def delete(self, session_key: str) -> bool:
        """Delete the record for a session."""
        data = self._read_all()
        if session_key not in data:
            return False
        try:
            del data[session_key]
            self._write_all(data)
            return True
        except OSError as e:
            logger.error(f"Error deleting session '{session_key}' from {self._path}: {e}")
            return False
