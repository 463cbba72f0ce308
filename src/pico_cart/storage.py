"""Key-value stores the cart persists into.

The cart treats storage as an opaque async ``get``/``set`` over string values.
Two backends ship with the package: a process-local dict and a directory of
files that survives restarts.
"""
import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable
from urllib.parse import quote

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class FileKeyValueStore:
    """One UTF-8 file per key under ``root``.

    Writes land in a temporary sibling first and are moved into place with
    ``os.replace``, so readers see either the old value or the new one.
    """

    def __init__(self, root: str | os.PathLike):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / f"{quote(key, safe='')}.json"

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._read, self.path_for(key))

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, self.path_for(key), value)

    @staticmethod
    def _read(path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    @staticmethod
    def _write(path: Path, value: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(value), path)
