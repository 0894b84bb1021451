import io
import zipfile

from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Events.event_dispatcher import EventDispatcher
from BaselineScanner.GitHub.GitHubClient import GitHubClient
from BaselineScanner.Routes.AnalyzeRoute import CreateApp
from BaselineScanner.Utility.env import ScannerSettings


REPO_API = "https://api.github.com/repos/owner/repo"
ARCHIVE = "https://github.com/owner/repo/archive/refs/heads/main.zip"


class DummyResponse:
    def __init__(self, status_code, json_data=None, content=b"", reason="OK"):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.reason = reason

    def json(self):
        if self._json is None:
            raise ValueError("No JSON")
        return self._json

    def iter_content(self, chunk_size=1):
        yield self.content

    def close(self):
        pass


class DummySession:
    def __init__(self, responses):
        self.responses = responses
        self.headers = {}

    def get(self, url, params=None, stream=False, timeout=None):
        return self.responses.get(url, DummyResponse(404, reason="Not Found"))


def make_zip(entries):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in entries.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def make_client(responses, dispatcher=None):
    app = CreateApp({
        "settings": ScannerSettings(),
        "catalog": ReferenceCatalog(),
        "client": GitHubClient(session=DummySession(responses)),
        "dispatcher": dispatcher,
    })
    return app.test_client()


REPO_ZIP = make_zip({
    "repo-main/styles/card.css": ".card:has(img) { container-type: inline-size; width: clamp(1rem, 2vw, 3rem); }",
    "repo-main/styles/spin.scss": "@keyframes spin { from { transform: rotate(0deg); } to { transform: rotate(360deg); } }",
    "repo-main/styles/broken.css": ".ok { color: red; } .dangling",
    "repo-main/node_modules/lib/lib.css": ".lib { popover: auto; }",
    "repo-main/index.html": "<html></html>",
})


def test_health_check():
    res = make_client({}).get("/api/health-check")
    assert res.status_code == 200
    assert res.get_json()["status"] == "healthy"


def test_analyze_requires_url():
    res = make_client({}).post("/analyze", json={})
    assert res.status_code == 400
    assert res.get_json()["error"] == "invalid_parameter"


def test_analyze_rejects_non_github_url():
    res = make_client({}).post("/analyze", json={"url": "https://gitlab.com/owner/repo"})
    assert res.status_code == 400


def test_analyze_repository():
    events = []
    dispatcher = EventDispatcher()
    dispatcher.subscribe("scan_completed", lambda **kw: events.append(kw["target"]))
    client = make_client({
        REPO_API: DummyResponse(200, json_data={"default_branch": "main", "html_url": "https://github.com/owner/repo"}),
        ARCHIVE: DummyResponse(200, content=REPO_ZIP),
    }, dispatcher)

    res = client.post("/analyze", json={"url": "https://github.com/owner/repo"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["cssFilesCount"] == 3
    assert data["documentsAnalyzed"] == 3
    assert data["documentsFailed"] == 1
    assert data["stats"] == {"newlyAvailable": 3, "widelyAvailable": 3, "experimental": 0, "stable": 0}
    assert data["totalFeatures"] == 6
    names = [f["name"] for f in data["features"]]
    assert set(names) == {":has()", "container-type", "clamp()", "width", "@keyframes", "transform"}
    assert "popover" not in names
    assert data["repositoryInfo"] == {
        "name": "repo", "owner": "owner", "defaultBranch": "main", "url": "https://github.com/owner/repo",
    }
    assert events == ["https://github.com/owner/repo"]


def test_analyze_archive_url_without_css():
    client = make_client({ARCHIVE: DummyResponse(200, content=make_zip({"repo-main/README.md": "# hi"}))})
    res = client.post("/analyze", json={"url": ARCHIVE})
    assert res.status_code == 200
    data = res.get_json()
    assert data["repositoryInfo"] is None
    assert data["cssFilesCount"] == 0
    assert data["features"] == []
    assert data["message"] == "No CSS files found in the repository"


def test_analyze_repository_not_found():
    res = make_client({}).post("/analyze", json={"url": "https://github.com/owner/missing"})
    assert res.status_code == 404
    assert res.get_json()["error"] == "not_found"


def test_analyze_corrupt_archive():
    client = make_client({
        REPO_API: DummyResponse(200, json_data={"default_branch": "main"}),
        ARCHIVE: DummyResponse(200, content=b"not a zip"),
    })
    res = client.post("/analyze", json={"url": "owner/repo"})
    assert res.status_code == 502
    assert res.get_json()["error"] == "archive_error"


def test_unknown_endpoint_returns_json_404():
    res = make_client({}).get("/api/nothing")
    assert res.status_code == 404
    assert res.get_json()["error"] == "not_found"


def test_method_not_allowed():
    res = make_client({}).get("/analyze")
    assert res.status_code == 405


def test_oversized_archive_contents_rejected():
    app = CreateApp({
        "settings": ScannerSettings(max_extracted_size=10),
        "catalog": ReferenceCatalog(),
        "client": GitHubClient(session=DummySession({ARCHIVE: DummyResponse(200, content=REPO_ZIP)})),
    })
    res = app.test_client().post("/analyze", json={"url": ARCHIVE})
    assert res.status_code == 502
    assert res.get_json()["error"] == "archive_error"


def test_requests_share_one_github_client(monkeypatch):
    seen = []
    original = GitHubClient.download_archive

    def recording_download(self, url, filepath, max_bytes=None):
        seen.append(self)
        return original(self, url, filepath, max_bytes=max_bytes)

    monkeypatch.setattr(GitHubClient, "download_archive", recording_download)
    monkeypatch.setattr(GitHubClient, "from_settings", classmethod(
        lambda cls, settings: cls(session=DummySession({ARCHIVE: DummyResponse(200, content=REPO_ZIP)}))))
    app = CreateApp({"settings": ScannerSettings(), "catalog": ReferenceCatalog()})
    client = app.test_client()
    assert client.post("/analyze", json={"url": ARCHIVE}).status_code == 200
    assert client.post("/analyze", json={"url": ARCHIVE}).status_code == 200
    assert len(seen) == 2
    assert seen[0] is seen[1] is app.extensions["baseline_scanner"]["client"]
