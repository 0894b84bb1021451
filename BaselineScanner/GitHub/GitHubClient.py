"""
Lightweight GitHub client to resolve repositories and download source archives.
"""
from typing import Any, Dict, Optional
import logging
import requests

from BaselineScanner.Exception.ScanErrors import ArchiveError, GitHubError
from BaselineScanner.Model.RepositoryInfo import RepositoryInfo
from BaselineScanner.Utility.url import build_archive_url

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class GitHubClient:
    def __init__(self, token: Optional[str] = None, session: Optional[requests.Session] = None,
                 api_root: str = "https://api.github.com", github_root: str = "https://github.com",
                 timeout: float = 30.0):
        self.session = session or requests.Session()
        if token:
            self.session.headers.update({"Authorization": f"token {token}"})
        self.session.headers.update({"Accept": "application/vnd.github+json"})
        self.base = api_root.rstrip("/")
        self.github_root = github_root.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "GitHubClient":
        return cls(
            token=settings.github_token,
            api_root=settings.github_api_root,
            github_root=settings.github_root,
            timeout=settings.request_timeout,
        )

    def _handle_response(self, response: requests.Response, repo: Optional[str] = None) -> Any:
        if response.status_code == 404:
            raise GitHubError(f"Repository not found or is private: {repo}", 404)
        elif response.status_code == 401:
            raise GitHubError("Unauthorized: Invalid GitHub token", 401)
        elif response.status_code == 403:
            raise GitHubError("Rate limited: GitHub API quota exceeded", 429)
        elif response.status_code != 200:
            raise GitHubError(f"GitHub API error: {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError:
            raise GitHubError("GitHub API returned an invalid JSON body", 502)

    def get_repo(self, repo_full_name: str) -> Dict[str, Any]:
        url = f"{self.base}/repos/{repo_full_name}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GitHubError(f"GitHub API request failed: {e}", 502) from e
        return self._handle_response(response, repo_full_name)

    def get_repo_info(self, repo_full_name: str) -> RepositoryInfo:
        data = self.get_repo(repo_full_name)
        owner, repo = repo_full_name.split("/", 1)
        default_branch = data.get("default_branch") or "main"
        return RepositoryInfo(
            owner=owner,
            repo=repo,
            default_branch=default_branch,
            archive_url=build_archive_url(self.github_root, repo_full_name, default_branch),
            html_url=data.get("html_url") or f"{self.github_root}/{repo_full_name}",
        )

    def download_archive(self, url: str, filepath: str, max_bytes: Optional[int] = None) -> str:
        """Stream `url` into `filepath`, aborting once `max_bytes` is exceeded."""
        logger.info("Downloading repository from: %s", url)
        try:
            response = self.session.get(url, stream=True, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GitHubError(f"Failed to download file: {e}", 502) from e
        try:
            if response.status_code != 200:
                raise GitHubError(f"Failed to download file: {response.status_code} {response.reason}",
                                  response.status_code)
            written = 0
            with open(filepath, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    written += len(chunk)
                    if max_bytes is not None and written > max_bytes:
                        raise ArchiveError(f"Archive exceeds maximum size of {max_bytes} bytes", url)
                    f.write(chunk)
        finally:
            response.close()
        logger.info("Downloaded %d bytes to %s", written, filepath)
        return filepath
