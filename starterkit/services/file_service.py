"""
Starter Kit — File Service
===========================

What:  Creates directories and writes placeholder files for a new project.
How:   `mkdir -p` semantics for directories; async text writes via aiofiles.
       Existing files at a layout path are overwritten, nothing else in the
       project directory is touched.
Who:   Called by ProjectService for the base files and the `api/` tree.

Paths handed to this service are already joined with the project root;
relative layout paths never reach the filesystem on their own.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

import aiofiles

from starterkit.exceptions import FileStorageError
from starterkit.schemas.blueprint import PlaceholderFile

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileService:
    """
    Writes a layout onto disk under a single project root.

    Lifecycle:
        1. ProjectService creates one FileService per project root
        2. ensure_directory() creates the root and every layout directory
        3. write_placeholders() writes each file, parents first
        4. On any OS error or unusable path: FileStorageError, no cleanup of what was written
    """

    def __init__(self, root: PathLike):
        self.root = Path(root)

    def resolve(self, relative_path: str) -> Path:
        """Join a POSIX-style layout path onto the project root."""
        return self.root.joinpath(*relative_path.split("/"))

    def ensure_directory(self, path: PathLike) -> Path:
        """
        Create `path` and any missing parents.

        Raises:
            FileStorageError if the directory cannot be created, including when
            a regular file already occupies the path.
        """
        directory = Path(path)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            logger.error("Failed to create directory %s: %s", directory, e)
            raise FileStorageError(
                message=f"Could not create directory '{directory}'",
                path=str(directory),
                context={"os_error": str(e)},
            ) from e
        logger.debug("Directory ready: %s", directory)
        return directory

    async def write_file(self, path: PathLike, content: str) -> Path:
        """
        Write UTF-8 text to `path`, creating parent directories as needed.

        An empty `content` leaves an empty file behind (the `touch` case).

        Raises:
            FileStorageError if the parent directory or the file cannot be written.
        """
        target = Path(path)
        self.ensure_directory(target.parent)
        try:
            async with aiofiles.open(target, "w", encoding="utf-8") as f:
                await f.write(content)
        except (OSError, ValueError) as e:
            logger.error("Failed to write file %s: %s", target, e)
            raise FileStorageError(
                message=f"Could not write file '{target}'",
                path=str(target),
                context={"os_error": str(e)},
            ) from e

        logger.debug("File written: %s (%d bytes)", target, len(content.encode("utf-8")))
        return target

    async def write_placeholders(self, placeholders: Iterable[PlaceholderFile]) -> List[Path]:
        """Write each placeholder under the root, in the given order."""
        written = []
        for placeholder in placeholders:
            written.append(await self.write_file(self.resolve(placeholder.path), placeholder.content))
        return written

    def create_directories(self, relative_dirs: Iterable[str]) -> List[Path]:
        return [self.ensure_directory(self.resolve(d)) for d in relative_dirs]
