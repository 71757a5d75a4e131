"""Loads the bundled style guide."""

import logging
from pathlib import Path

from starterkit.exceptions import FileStorageError

logger = logging.getLogger(__name__)

STYLE_GUIDE_PATH = Path(__file__).resolve().parent.parent / "docs" / "style_guide.md"


def load_style_guide(path: Path = STYLE_GUIDE_PATH) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Style guide unreadable at %s: %s", path, e)
        raise FileStorageError(
            message="The bundled style guide could not be read; reinstall starterkit",
            path=str(path),
            context={"os_error": str(e)},
        ) from e
