
"""Errors raised while acquiring and scanning a repository."""
from typing import Optional


"""Raised when the GitHub API or archive host returns an error response."""
class GitHubError(Exception):

    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

"""Raised when a repository archive is too large, corrupt, or contains unsafe paths."""
class ArchiveError(Exception):
    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(self.message)

"""Raised when a single style-sheet document cannot be parsed.
        Attributes:
            identifier: document the error belongs to
            line: 1-based line of the first parse error, when known
            column: 1-based column of the first parse error, when known
"""
class DocumentParseError(Exception):
    def __init__(self, identifier: str, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.identifier = identifier
        self.message = message
        self.line = line
        self.column = column
        location = f" at {line}:{column}" if line is not None else ""
        super().__init__(f"{identifier}{location}: {message}")

"""Raised when a reference catalog is structurally invalid."""
class CatalogError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
