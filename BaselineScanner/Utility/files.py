"""Locate and read style-sheet files in an extracted repository."""
import logging
import os
from typing import List, Tuple

logger = logging.getLogger(__name__)

STYLESHEET_EXTENSIONS = (".css", ".scss", ".sass", ".less")
IGNORED_DIRECTORIES = {"node_modules", ".git", "dist", "build", "coverage"}


def find_stylesheet_files(root: str) -> List[str]:
    found: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRECTORIES)
        for filename in sorted(filenames):
            if filename.endswith(STYLESHEET_EXTENSIONS):
                found.append(os.path.join(dirpath, filename))
    return found


def read_documents(paths: List[str], root: str) -> List[Tuple[str, str]]:
    """Read files as (relative path, text) pairs, skipping files that cannot be read."""
    documents: List[Tuple[str, str]] = []
    for path in paths:
        identifier = os.path.relpath(path, root).replace(os.sep, "/")
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                documents.append((identifier, f.read()))
        except OSError as e:
            logger.warning("Skipping unreadable file %s: %s", identifier, e)
    return documents
