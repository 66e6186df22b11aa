"""File-backed installation registry.

Provides a stable installation id that survives restarts:

1. an explicit override (``INSTALLATION_ID``) wins,
2. otherwise the id persisted at ``path`` is used,
3. otherwise a fresh id is minted and persisted there.

The record is computed once per process and memoised.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

import aiofiles
import aiofiles.os

from beacon.core.hashing import new_id
from beacon.core.logging import logger
from beacon.schemas.installation import Installation


class FileInstallationRegistry:
    """InstallationRegistry persisting the id to a local file."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        override: Optional[str] = None,
        version: Optional[str] = None,
    ) -> None:
        """Configure the registry.

        Args:
            path: File holding the persisted installation id.
            override: Fixed installation id; skips the file entirely.
            version: Application version reported with the record.
        """
        self._path = Path(path)
        self._override = override.strip() if override else None
        self._version = version
        self._install: Optional[Installation] = None
        self._lock = asyncio.Lock()

    async def get_install(self) -> Installation:
        """Return the installation record, creating the id on first use."""
        if self._install is not None:
            return self._install

        async with self._lock:
            if self._install is None:
                install_id = self._override or await self._load_or_create()
                self._install = Installation(install_id=install_id, version=self._version)
        return self._install

    async def _load_or_create(self) -> str:
        if await aiofiles.os.path.exists(self._path):
            async with aiofiles.open(self._path, "r", encoding="utf-8") as f:
                existing = (await f.read()).strip()
            if existing:
                return existing

        install_id = new_id()
        await aiofiles.os.makedirs(self._path.parent, exist_ok=True)
        async with aiofiles.open(self._path, "w", encoding="utf-8") as f:
            await f.write(install_id)
        logger.info(f"Minted installation id {install_id} at {self._path}")
        return install_id
