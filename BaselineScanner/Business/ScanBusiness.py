import os
import shutil
import tempfile

from typing import Any, Dict, Optional, Tuple

from BaselineScanner.Business.FeatureAggregator import FeatureAggregator
from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Events.event_dispatcher import EventDispatcher
from BaselineScanner.GitHub.GitHubClient import GitHubClient
from BaselineScanner.Model.RepositoryInfo import RepositoryInfo
from BaselineScanner.Utility.archive import extract_zip
from BaselineScanner.Utility.env import ScannerSettings
from BaselineScanner.Utility.files import find_stylesheet_files, read_documents
from BaselineScanner.Utility.url import is_archive_url, parse_repo_url

import logging
logger = logging.getLogger(__name__)


class ScanBusiness:

    """High-level orchestrator: fetch a repository snapshot, then analyze its style sheets.
    Emits events via `EventDispatcher` (scan_started, scan_completed).
    """
    def __init__(self, catalog: ReferenceCatalog, settings: Optional[ScannerSettings] = None,
                 client: Optional[GitHubClient] = None, dispatcher: Optional[EventDispatcher] = None):
        self.settings = settings or ScannerSettings.from_env()
        self.client = client or GitHubClient.from_settings(self.settings)
        self.dispatcher = dispatcher or EventDispatcher()
        self.aggregator = FeatureAggregator(catalog, dispatcher=self.dispatcher)

    def resolve(self, url: str) -> Tuple[str, Optional[RepositoryInfo]]:
        """Return the archive URL for `url` and, for repository URLs, its metadata."""
        if not url:
            raise ValueError("GitHub URL is required")
        if is_archive_url(url):
            return url.strip(), None
        repo_info = self.client.get_repo_info(parse_repo_url(url))
        return repo_info.archive_url, repo_info

    def ScanRepository(self, url: str) -> Dict[str, Any]:
        archive_url, repo_info = self.resolve(url)
        self.dispatcher.dispatch("scan_started", target=url)

        temp_dir = tempfile.mkdtemp(prefix="baseline-scan-")
        try:
            zip_path = os.path.join(temp_dir, "repo.zip")
            extract_path = os.path.join(temp_dir, "extracted")
            self.client.download_archive(archive_url, zip_path, max_bytes=self.settings.max_archive_size)

            logger.info("Extracting repository...")
            extract_zip(zip_path, extract_path, max_bytes=self.settings.max_extracted_size)

            logger.info("Finding CSS files...")
            css_files = find_stylesheet_files(extract_path)
            documents = read_documents(css_files, extract_path)
            report = self.aggregator.analyze(documents)
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

        result = report.to_dict()
        result["cssFilesCount"] = len(css_files)
        result["repositoryInfo"] = repo_info.to_dict() if repo_info else None

        self.dispatcher.dispatch("scan_completed", target=url, report=report)
        logger.info("Scan of %s found %d features in %d CSS files", url, report.total_features, len(css_files))
        return result
