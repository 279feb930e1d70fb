"""Tests for saved reports and the console summary."""

import io
import json

import requests

from conftest import FakeResponse
from insiderci.models.sast import Dra, Library, Sast, Vulnerability
from insiderci.utils.file_manager import FileManager
from insiderci.utils.report_writer import ReportWriter
from insiderci.utils.summary import print_summary

SAST = Sast(
    score=65.0,
    score_text="65",
    vulnerabilities=(Vulnerability('7.5', 'High', 'CWE-79', 'static', 'x1',
                                   '<script> reflected in view.html', 'XSS', 'xss'),),
    libraries=(Library('lodash', '4.17.0'),),
    dras=(Dra('app.js', 'email', 'pii'),),
)


def _writer(config, tmp_path):
    config.output_directory = str(tmp_path / "out")
    return ReportWriter(config, FileManager(config))


def test_save_writes_json_html_and_style(monkeypatch, config, tmp_path):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(200, content=b"body{}"))

    written = _writer(config, tmp_path).save(42, SAST)

    out = tmp_path / "out"
    assert written == [str(out / "result-42.json"), str(out / "result-42.html"), str(out / "style.css")]
    assert json.loads((out / "result-42.json").read_text()) == SAST.to_dict()
    html = (out / "result-42.html").read_text()
    assert "Score Security 65/100" in html
    assert "&lt;script&gt; reflected" in html
    assert "lodash" in html
    assert (out / "style.css").read_bytes() == b"body{}"


def test_stylesheet_failure_does_not_fail_save(monkeypatch, config, tmp_path):
    def offline(url, timeout):
        raise requests.exceptions.ConnectionError("offline")
    monkeypatch.setattr(requests, "get", offline)

    written = _writer(config, tmp_path).save(42, SAST)

    assert [p.rsplit("/", 1)[-1] for p in written] == ["result-42.json", "result-42.html"]
    assert not (tmp_path / "out" / "style.css").exists()


def test_stylesheet_http_error_is_tolerated(monkeypatch, config, tmp_path):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse(404, text="not found"))

    assert _writer(config, tmp_path).fetch_style() is None


def test_summary_lists_every_section():
    out = io.StringIO()

    print_summary(SAST, out)

    text = out.getvalue()
    assert "Score Security 65/100" in text
    assert "DRA - Data Risk Analytics" in text
    assert "File: app.js" in text
    assert "lodash" in text and "4.17.0" in text
    assert "VulnerabilityID: x1" in text
    assert "ClassMessage: XSS" in text


def test_summary_skips_empty_sections():
    out = io.StringIO()

    print_summary(Sast(score=100.0, score_text="100"), out)

    text = out.getvalue()
    assert "Score Security 100/100" in text
    assert "Vulnerabilities" not in text
    assert "Library" not in text
