"""Shared test fixtures."""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from insiderci.utils.config import Config  # noqa: E402
from insiderci.utils.errors import ServiceUnavailable  # noqa: E402


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, body=None, text=None, content=b''):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else ('' if body is None else str(body))
        self.content = content

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeClock:
    """Monotonic clock advanced only by sleep."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedClient:
    """APIClient double that answers from per-endpoint scripts.

    Each script entry is either a dict (returned) or an exception (raised).
    """

    def __init__(self, scripts):
        self.scripts = {key: list(value) for key, value in scripts.items()}
        self.calls = []
        self.timeouts = []

    def send(self, method, endpoint, json_data=None, files=None, session=None, timeout=None):
        self.calls.append((method, endpoint, session))
        self.timeouts.append(timeout)
        for prefix, script in self.scripts.items():
            if endpoint.startswith(prefix):
                item = script.pop(0) if len(script) > 1 else script[0]
                if isinstance(item, Exception):
                    raise item
                return item
        raise AssertionError(f"Unexpected call {method} {endpoint}")

    def endpoints(self):
        return [endpoint for _, endpoint, _ in self.calls]


def sast_payload(score="100", vulnerabilities=None, libraries=None, dras=None, status="completed"):
    return {
        'status': status,
        'sastResult': {'securityScore': score},
        'sastVulnerabilities': vulnerabilities if vulnerabilities is not None else [],
        'sastLibraries': libraries if libraries is not None else [],
        'sastDras': dras if dras is not None else [],
    }


VULNERABILITY = {
    'cvss': '7.5',
    'rank': 'High',
    'class': 'CWE-89',
    'method': 'static',
    'vul_id': 'a1b2',
    'longMessage': 'SQL query built from user input in db.py line 10',
    'classMessage': 'SQL Injection',
    'shortMessage': 'SQL injection',
}


@pytest.fixture
def config():
    cfg = Config()
    cfg.base_url = "https://insider.test"
    cfg.email = "ci@example.com"
    cfg.password = "s3cret"
    cfg.component_id = 42
    cfg.poll_interval = 10.0
    cfg.max_polling_time = 300
    cfg.max_poll_ticks = 20
    cfg.max_retries = 3
    cfg.retry_delay = 1.0
    return cfg


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def archive(tmp_path):
    path = tmp_path / "project.zip"
    path.write_bytes(b"PK\x05\x06" + b"\x00" * 18)
    return str(path)


@pytest.fixture
def transient():
    return ServiceUnavailable("Service returned 503: try later", status_code=503)
