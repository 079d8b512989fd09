"""Integration tests for the HTTP API (devgate.main)."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from devgate.core.dependencies import get_analyzer, get_github_client
from devgate.core.exceptions import ExternalFailureError
from devgate.main import app
from devgate.models.schemas import Diagnostic, DiagnosticReport, Severity
from devgate.services.analyzer import AvailabilityReport
from devgate.services.github_client import GitHubClient, GitHubClientConfig


class StubAnalyzer:
    """Analyzer stand-in returning canned results."""

    def __init__(self, availability=None, report=None, error=None):
        self.availability = availability or AvailabilityReport(installed=True, version="pyright 1.1.380")
        self.report = report or DiagnosticReport()
        self.error = error
        self.analyzed = []

    async def check_availability(self):
        return self.availability

    async def analyze(self, path):
        self.analyzed.append(path)
        if self.error:
            raise self.error
        return self.report


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_analyzer(stub):
    app.dependency_overrides[get_analyzer] = lambda: stub
    return stub


def use_github(handler, token="ghp_test"):
    github = GitHubClient(
        GitHubClientConfig(token=token, api_url="https://api.github.test"),
        transport=httpx.MockTransport(handler),
    )
    app.dependency_overrides[get_github_client] = lambda: github
    return github


# ── Root & health ────────────────────────────────────────────────────────────


class TestRootAndHealth:
    def test_root_lists_endpoints(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "running"
        assert "/api/files/search" in data["endpoints"]["files"]
        assert "/api/python/fix" in data["endpoints"]["python"]

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_unknown_route(self, client):
        resp = client.get("/api/nope")
        assert resp.status_code == 404
        assert resp.json()["status"] == "error"


# ── Files ────────────────────────────────────────────────────────────────────


class TestFilesEndpoints:
    def test_list(self, client, sample_tree):
        resp = client.post("/api/files/list", json={"path": str(sample_tree)})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["path"] == str(sample_tree)
        files = {f["name"]: f for f in data["files"]}
        assert files["sub"]["type"] == "directory"
        assert files["foo.py"]["type"] == "file"
        assert set(files["foo.py"]) == {"name", "path", "type", "size", "created", "modified"}

    def test_list_missing(self, client, tmp_path):
        resp = client.post("/api/files/list", json={"path": str(tmp_path / "nope")})
        assert resp.status_code == 404
        data = resp.json()
        assert data["status"] == "error"
        assert "Directory not found" in data["message"]

    def test_list_not_directory(self, client, sample_tree):
        resp = client.post("/api/files/list", json={"path": str(sample_tree / "foo.py")})
        assert resp.status_code == 400
        assert resp.json()["status"] == "error"

    def test_missing_path_field(self, client):
        resp = client.post("/api/files/list", json={})
        assert resp.status_code == 400
        data = resp.json()
        assert data["status"] == "error"
        assert "path" in data["message"]

    def test_empty_path_rejected(self, client):
        resp = client.post("/api/files/read", json={"path": ""})
        assert resp.status_code == 400

    def test_malformed_json(self, client):
        resp = client.post(
            "/api/files/read",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400

    def test_write_then_read(self, client, tmp_path):
        target = tmp_path / "a" / "b" / "c.txt"
        resp = client.post("/api/files/write", json={"path": str(target), "content": "x\ny"})
        assert resp.status_code == 200
        assert resp.json()["message"] == "File written successfully"

        resp = client.post("/api/files/read", json={"path": str(target)})
        assert resp.status_code == 200
        assert resp.json()["content"] == "x\ny"

    def test_write_empty_content(self, client, tmp_path):
        resp = client.post("/api/files/write", json={"path": str(tmp_path / "e.txt"), "content": ""})
        assert resp.status_code == 200

    def test_write_requires_content(self, client, tmp_path):
        resp = client.post("/api/files/write", json={"path": str(tmp_path / "e.txt")})
        assert resp.status_code == 400

    def test_read_missing(self, client, tmp_path):
        resp = client.post("/api/files/read", json={"path": str(tmp_path / "nope.txt")})
        assert resp.status_code == 404

    def test_read_directory(self, client, tmp_path):
        resp = client.post("/api/files/read", json={"path": str(tmp_path)})
        assert resp.status_code == 400

    def test_search(self, client, sample_tree):
        resp = client.post("/api/files/search", json={"path": str(sample_tree), "pattern": "foo"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["pattern"] == "foo"
        names = [r["name"] for r in data["results"]]
        assert "foo.py" in names
        assert "foo2.py" in names
        assert "bar.txt" not in names

    def test_search_requires_pattern(self, client, sample_tree):
        resp = client.post("/api/files/search", json={"path": str(sample_tree)})
        assert resp.status_code == 400

    def test_search_bad_regex(self, client, sample_tree):
        resp = client.post("/api/files/search", json={"path": str(sample_tree), "pattern": "("})
        assert resp.status_code == 400
        assert "Invalid search pattern" in resp.json()["message"]

    def test_search_missing_dir(self, client, tmp_path):
        resp = client.post("/api/files/search", json={"path": str(tmp_path / "nope"), "pattern": "x"})
        assert resp.status_code == 404


# ── Python ───────────────────────────────────────────────────────────────────


class TestPythonEndpoints:
    def test_check_installed(self, client):
        use_analyzer(StubAnalyzer())
        resp = client.get("/api/python/check")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["installed"] is True
        assert data["version"] == "pyright 1.1.380"

    def test_check_not_installed(self, client):
        use_analyzer(StubAnalyzer(availability=AvailabilityReport(installed=False)))
        resp = client.get("/api/python/check")
        assert resp.status_code == 404
        data = resp.json()
        assert data == {
            "status": "error",
            "message": "Pyright is not installed",
            "installed": False,
        }

    def test_analyze(self, client, sample_file):
        report = DiagnosticReport(
            diagnostics=[
                Diagnostic(severity=Severity.ERROR, file=str(sample_file), line=1, column=1, message="bad")
            ],
            version="1.1.380",
        )
        stub = use_analyzer(StubAnalyzer(report=report))
        resp = client.post("/api/python/analyze", json={"path": str(sample_file)})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["diagnostics"][0]["severity"] == "error"
        assert data["diagnostics"][0]["message"] == "bad"
        assert data["raw"] is None
        assert stub.analyzed == [str(sample_file)]

    def test_analyze_clean_file(self, client, sample_file):
        use_analyzer(StubAnalyzer(report=DiagnosticReport()))
        resp = client.post("/api/python/analyze", json={"path": str(sample_file)})
        assert resp.status_code == 200
        assert resp.json()["diagnostics"] == []

    def test_analyze_unparseable_is_success(self, client, sample_file):
        use_analyzer(StubAnalyzer(report=DiagnosticReport(raw="garbage", parse_error="Expecting value")))
        resp = client.post("/api/python/analyze", json={"path": str(sample_file)})
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["raw"] == "garbage"
        assert data["parse_error"] == "Expecting value"

    def test_analyze_missing_path(self, client, tmp_path):
        # Uses the real analyzer: the path check happens before any process is spawned.
        resp = client.post("/api/python/analyze", json={"path": str(tmp_path / "nope.py")})
        assert resp.status_code == 404
        assert "not found" in resp.json()["message"]

    def test_analyze_timeout(self, client, sample_file):
        use_analyzer(StubAnalyzer(error=ExternalFailureError("Pyright timed out after 1s")))
        resp = client.post("/api/python/analyze", json={"path": str(sample_file)})
        assert resp.status_code == 500
        assert resp.json()["message"] == "Pyright timed out after 1s"

    def test_fix(self, client, sample_file):
        resp = client.post(
            "/api/python/fix",
            json={"path": str(sample_file), "fixes": [{"oldText": "a=1", "newText": "a=10"}]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["applied"] == 1
        assert data["requested"] == 1
        assert sample_file.read_text() == "a=10\nb=2"

    def test_fix_absent_text(self, client, sample_file):
        resp = client.post(
            "/api/python/fix",
            json={"path": str(sample_file), "fixes": [{"oldText": "nope", "newText": "x"}]},
        )
        assert resp.status_code == 200
        assert resp.json()["applied"] == 0
        assert sample_file.read_text() == "a=1\nb=2"

    def test_fix_missing_file(self, client, tmp_path):
        resp = client.post("/api/python/fix", json={"path": str(tmp_path / "nope.py"), "fixes": []})
        assert resp.status_code == 404

    def test_fix_requires_array(self, client, sample_file):
        resp = client.post("/api/python/fix", json={"path": str(sample_file), "fixes": "a=1"})
        assert resp.status_code == 400

    def test_fix_skips_empty_old_text(self, client, sample_file):
        resp = client.post(
            "/api/python/fix",
            json={
                "path": str(sample_file),
                "fixes": [{"oldText": "", "newText": "x"}, {"oldText": "b=2", "newText": "b=5"}],
            },
        )
        assert resp.status_code == 200
        assert resp.json()["applied"] == 1
        assert resp.json()["requested"] == 2
        assert sample_file.read_text() == "a=1\nb=5"


# ── GitHub ───────────────────────────────────────────────────────────────────


class TestGitHubEndpoints:
    def test_list_repos(self, client):
        use_github(lambda request: httpx.Response(200, json=[
            {"name": "hello", "full_name": "octo/hello", "description": "hi",
             "html_url": "https://github.com/octo/hello", "default_branch": "main"}
        ]))
        resp = client.get("/api/github/repos")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "success"
        assert data["repositories"][0]["url"] == "https://github.com/octo/hello"

    def test_missing_token(self, client):
        use_github(lambda request: httpx.Response(200, json=[]), token=None)
        resp = client.get("/api/github/repos")
        assert resp.status_code == 500
        assert resp.json()["message"] == "GITHUB_TOKEN not set in environment variables"

    def test_content(self, client):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"name": "a.py", "path": "a.py", "sha": "s1", "type": "file"})

        use_github(handler)
        resp = client.post("/api/github/content", json={"owner": "octo", "repo": "hello", "path": "a.py", "ref": "main"})
        assert resp.status_code == 200
        assert resp.json()["content"]["sha"] == "s1"
        assert seen[0].url.params["ref"] == "main"

    def test_content_requires_owner(self, client):
        use_github(lambda request: httpx.Response(200, json={}))
        resp = client.post("/api/github/content", json={"repo": "hello"})
        assert resp.status_code == 400

    def test_update_create_and_update(self, client):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"content": {"sha": "new"}, "commit": {"sha": "c"}})

        use_github(handler)
        base = {"owner": "o", "repo": "r", "path": "f.txt", "content": "hi", "message": "m"}
        assert client.post("/api/github/update", json=base).status_code == 200
        assert client.post("/api/github/update", json={**base, "sha": "old"}).status_code == 200
        assert "sha" not in bodies[0]
        assert bodies[1]["sha"] == "old"

    def test_update_requires_message(self, client):
        use_github(lambda request: httpx.Response(200, json={}))
        resp = client.post("/api/github/update", json={"owner": "o", "repo": "r", "path": "f", "content": "c"})
        assert resp.status_code == 400

    def test_pull_request(self, client):
        use_github(lambda request: httpx.Response(201, json={
            "number": 7, "title": "T", "html_url": "https://github.com/o/r/pull/7"
        }))
        resp = client.post(
            "/api/github/pr",
            json={"owner": "o", "repo": "r", "title": "T", "head": "feat", "base": "main"},
        )
        assert resp.status_code == 200
        assert resp.json()["pull_request"] == {"number": 7, "title": "T", "url": "https://github.com/o/r/pull/7"}

    def test_remote_error_passthrough(self, client):
        use_github(lambda request: httpx.Response(422, json={"message": "Validation Failed"}))
        resp = client.post(
            "/api/github/pr",
            json={"owner": "o", "repo": "r", "title": "T", "head": "feat", "base": "main"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"status": "error", "message": "Validation Failed"}
