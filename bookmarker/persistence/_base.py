"""Base JSON persistence store."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from ..errors import ParseError, PersistenceError
from ..log import logger


class JsonStore:
    """Simple JSON file store with atomic write.

    The file is the store's single persistent slot: it is always read whole
    and written whole.  Subclasses override ``_default()`` to provide the
    empty-state value (``{}`` for dicts, ``[]`` for lists).
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def read_raw(self) -> dict | list:
        """Read and parse the JSON file.

        A missing file yields ``_default()``.  Raises :class:`ParseError`
        when the file cannot be read, is not UTF-8 or is not valid JSON.
        """
        try:
            if not self.path.exists():
                return self._default()
            data = self.path.read_bytes()
        except OSError as exc:
            raise ParseError(f"cannot read {self.path}: {exc}") from exc
        try:
            return json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise ParseError(f"{self.path} is not valid JSON: {exc}") from exc

    def load_raw(self) -> dict | list:
        """Like :meth:`read_raw` but returns ``_default()`` on any error."""
        try:
            return self.read_raw()
        except ParseError:
            logger.debug("failed to load JSON store from %s", self.path, exc_info=True)
        return self._default()

    def save_raw(self, data: dict | list, *, sort_keys: bool = False) -> None:
        """Write *data* as pretty-printed JSON, creating parents as needed.

        The text is written to a sibling temp file and moved into place, so
        readers never see a partial file.  Raises :class:`PersistenceError`.
        """
        try:
            text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"cannot serialise data for {self.path}: {exc}") from exc

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.write("\n")
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise PersistenceError(f"cannot write {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("failed to remove temp file %s", tmp_name, exc_info=True)

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
