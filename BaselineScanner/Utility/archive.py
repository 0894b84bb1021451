"""Zip archive extraction for downloaded repository snapshots."""
import logging
import os
import shutil
import zipfile
from typing import List, Optional

from BaselineScanner.Exception.ScanErrors import ArchiveError

logger = logging.getLogger(__name__)


"""Ensure `path` is inside `root` after normalization."""
def _is_safe_subpath(root: str, path: str) -> bool:
    root = os.path.realpath(root)
    target = os.path.realpath(os.path.join(root, path))
    return os.path.commonpath([root]) == os.path.commonpath([root, target])


def extract_zip(zip_path: str, extract_path: str, max_bytes: Optional[int] = None) -> List[str]:
    """Extract every file entry of `zip_path` below `extract_path` and return their paths.

    Raises ArchiveError before writing anything when the declared uncompressed
    size exceeds `max_bytes`.
    """
    os.makedirs(extract_path, exist_ok=True)
    extracted: List[str] = []
    try:
        with zipfile.ZipFile(zip_path) as archive:
            total = sum(entry.file_size for entry in archive.infolist())
            if max_bytes is not None and total > max_bytes:
                logger.error("Archive %s expands to %d bytes (limit %d)", zip_path, total, max_bytes)
                raise ArchiveError(f"Archive expands beyond maximum size of {max_bytes} bytes", zip_path)
            for entry in archive.infolist():
                if entry.is_dir():
                    continue
                if not _is_safe_subpath(extract_path, entry.filename):
                    logger.error("Archive entry escapes extraction root: %s", entry.filename)
                    raise ArchiveError(f"Archive entry '{entry.filename}' escapes extraction root", entry.filename)
                full_path = os.path.join(extract_path, entry.filename)
                os.makedirs(os.path.dirname(full_path), exist_ok=True)
                with archive.open(entry) as source, open(full_path, "wb") as target:
                    shutil.copyfileobj(source, target)
                extracted.append(full_path)
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"Invalid zip archive: {e}", zip_path) from e
    logger.info("Extracted %d files from %s", len(extracted), zip_path)
    return extracted
