"""Tests for the archive upload step."""

import pytest

from conftest import ScriptedClient
from insiderci.models.job import JobHandle
from insiderci.operations.job_submitter import JobSubmitter
from insiderci.utils.auth import Session
from insiderci.utils.errors import (
    AuthError, RequestError, ServiceUnavailable, SubmissionError, ProtocolError
)

SESSION = Session(token="tok")


def test_submit_returns_handle(config, archive):
    client = ScriptedClient({'/sast/upload/': [{'id': 987}]})

    handle = JobSubmitter(config, client).execute(SESSION, archive, 42)

    assert handle == JobHandle(job_id='987', component_id=42)
    assert client.calls == [('POST', '/sast/upload/42', SESSION)]


@pytest.mark.parametrize("component_id", [0, -1, True, "42", None])
def test_invalid_component_fails_locally(config, archive, component_id):
    client = ScriptedClient({})

    with pytest.raises(SubmissionError, match="Invalid component ID"):
        JobSubmitter(config, client).execute(SESSION, archive, component_id)
    assert client.calls == []


def test_missing_archive_fails_locally(config, tmp_path):
    client = ScriptedClient({})

    with pytest.raises(SubmissionError, match="Archive not found"):
        JobSubmitter(config, client).execute(SESSION, str(tmp_path / "nope.zip"), 42)
    assert client.calls == []


def test_remote_rejection_carries_message_verbatim(config, archive):
    client = ScriptedClient({'/sast/upload/': [RequestError("Archive exceeds 200MB limit", status_code=413)]})

    with pytest.raises(SubmissionError) as excinfo:
        JobSubmitter(config, client).execute(SESSION, archive, 42)

    assert excinfo.value.message == "Archive exceeds 200MB limit"
    assert excinfo.value.status_code == 413


@pytest.mark.parametrize("error", [
    AuthError("token expired", status_code=401),
    ServiceUnavailable("Service returned 503", status_code=503),
])
def test_auth_and_outage_errors_are_not_retried(config, archive, error):
    client = ScriptedClient({'/sast/upload/': [error]})

    with pytest.raises(type(error)):
        JobSubmitter(config, client).execute(SESSION, archive, 42)
    assert len(client.calls) == 1


def test_response_without_job_id_is_protocol_error(config, archive):
    client = ScriptedClient({'/sast/upload/': [{'status': 'ok'}]})

    with pytest.raises(ProtocolError):
        JobSubmitter(config, client).execute(SESSION, archive, 42)
