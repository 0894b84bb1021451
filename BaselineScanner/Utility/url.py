"""URL utilities for GitHub repository parsing."""
import re
from urllib.parse import urlparse

GITHUB_HOSTS = ("github.com", "www.github.com")
_ARCHIVE_PATH = re.compile(r"^/([^/]+)/([^/]+)/archive/refs/heads/(.+)\.zip$")


def parse_repo_url(url: str) -> str:
    """Return 'owner/repo' for a GitHub https, ssh or bare owner/repo reference."""
    url = (url or "").strip()
    if url.startswith("git@"):
        _, path = url.split(":", 1)
    elif "://" in url or url.startswith("github.com"):
        parsed = urlparse(url if "://" in url else f"https://{url}")
        if parsed.netloc not in GITHUB_HOSTS:
            raise ValueError("URL must be a GitHub repository URL or GitHub archive URL")
        path = parsed.path
    else:
        path = url
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[:-4]
    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Invalid GitHub repository URL")
    return path


def is_archive_url(url: str) -> bool:
    if not url:
        return False
    parsed = urlparse(url.strip())
    return parsed.netloc in GITHUB_HOSTS and bool(_ARCHIVE_PATH.match(parsed.path))


def build_archive_url(github_root: str, full_name: str, branch: str) -> str:
    return f"{github_root.rstrip('/')}/{full_name}/archive/refs/heads/{branch}.zip"
