"""
Flask REST API for the CSS Baseline Scanner

This module exposes repository analysis over HTTP: a client posts a GitHub
repository URL and receives the CSS features used by the repository,
classified by browser-support maturity.

Endpoints:
    POST /analyze          - Analyze a repository's style sheets
    GET  /api/health-check - Health check
"""

from typing import Any, Dict, Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Business.ScanBusiness import ScanBusiness
from BaselineScanner.Exception.ScanErrors import ArchiveError, GitHubError
from BaselineScanner.GitHub.GitHubClient import GitHubClient
from BaselineScanner.Routes.validators import error_body, validate_analyze_payload
from BaselineScanner.Utility.env import ScannerSettings, load_env_file

import logging
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

"""Create and configure the Flask application.
    Args:
        config: Optional overrides: "settings" (ScannerSettings), "catalog"
                (ReferenceCatalog), "client" (GitHubClient, shared by
                all requests), "dispatcher"
    Returns:
        Flask application instance
    Raises:
        CatalogError: when the configured reference catalog is invalid
"""
def CreateApp(config: Optional[Dict[str, Any]] = None) -> Flask:
    config = config or {}
    app = Flask(__name__)
    # Load environment variables from .env
    load_env_file()
    settings = config.get("settings") or ScannerSettings.from_env()
    catalog = config.get("catalog") or LoadCatalog(settings)
    # One client (and connection pool) shared by all requests
    client = config.get("client") or GitHubClient.from_settings(settings)
    app.extensions["baseline_scanner"] = {"settings": settings, "catalog": catalog, "client": client}
    # Enable CORS for all routes
    CORS(app)

    def scanner() -> ScanBusiness:
        return ScanBusiness(catalog, settings=settings, client=client,
                            dispatcher=config.get("dispatcher"))

    RegisterRoutes(app, scanner)
    return app

"""Build the reference catalog once at startup, from BASELINE_CATALOG_PATH when set."""
def LoadCatalog(settings: ScannerSettings) -> ReferenceCatalog:
    if settings.catalog_path:
        return ReferenceCatalog.from_file(settings.catalog_path)
    return ReferenceCatalog()

"""Register all API routes.
    Args:
        app: Flask application instance
        scanner: factory returning a ScanBusiness for one request
"""
def RegisterRoutes(app: Flask, scanner) -> None:

    @app.route("/")
    def index():
        return "CSS Baseline Scanner is running!"

    @app.route('/api/health-check', methods=['GET'])
    def HealthCheck():
        return jsonify({
            "status": "healthy",
            "message": "CSS Baseline Scanner API is running"
        }), 200

    """Analyze the style sheets of a GitHub repository.
        Request JSON body:
        {
            "url": "https://github.com/owner/repo"   # or an .../archive/refs/heads/<branch>.zip URL
        }
        Returns:
            JSON report with per-tier stats and the classified feature list
    """
    @app.route('/analyze', methods=['POST'])
    def AnalyzeRepositoryEndpoint():
        data = request.get_json(silent=True) or {}
        try:
            url = validate_analyze_payload(data)
        except ValueError as e:
            body, status = error_body("invalid_parameter", str(e), 400)
            return jsonify(body), status

        try:
            logger.info("Analyzing repository: %s", url)
            result = scanner().ScanRepository(url)
            logger.info("Analysis completed for repository: %s", url)
            return jsonify(result), 200

        except GitHubError as e:
            logger.error(f"GitHub error: {e.message}")
            if e.status_code == 401:
                body, status = error_body("unauthorized", "Invalid GitHub token", 401)
            elif e.status_code == 429:
                body, status = error_body("rate_limit", "GitHub API rate limit exceeded", 429)
            elif e.status_code == 404:
                body, status = error_body("not_found", "Repository not found or is private", 404)
            else:
                status = e.status_code if 400 <= e.status_code < 600 else 502
                body, status = error_body("github_error", e.message, status)
            return jsonify(body), status

        except ArchiveError as e:
            logger.error(f"Archive error: {e.message}")
            body, status = error_body("archive_error", e.message, 502)
            return jsonify(body), status

        except ValueError as e:
            logger.error(f"Validation error: {str(e)}")
            body, status = error_body("invalid_parameter", str(e), 400)
            return jsonify(body), status

        except Exception as e:
            logger.exception(f"Analysis error: {str(e)}")
            body, status = error_body("internal_error", f"Internal server error: {str(e)}", 500)
            return jsonify(body), status

    @app.errorhandler(404)
    def NotFound(error):
        return jsonify({
            "error": "not_found",
            "message": "Endpoint not found. Try GET /api/health-check or POST /analyze"
        }), 404

    @app.errorhandler(405)
    def MethodNotAllowed(error):
        return jsonify({
            "error": "method_not_allowed",
            "message": "Method not allowed for this endpoint"
        }), 405
