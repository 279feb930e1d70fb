"""Error taxonomy for the scan workflow."""


class WorkflowError(Exception):
    """Base class for every failure the scan workflow can surface.

    The orchestrator sets ``stage`` to the step that produced the error
    (authenticate, submit, poll, map) before re-raising it.
    """

    def __init__(self, message, stage=None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def __str__(self):
        return self.message


class TransportError(WorkflowError):
    """An HTTP call to the Insider API did not produce a usable response."""

    def __init__(self, message, status_code=None, stage=None):
        super().__init__(message, stage=stage)
        self.status_code = status_code


class AuthError(TransportError):
    """Bad credentials or a session the service no longer accepts."""


class RequestError(TransportError):
    """The service rejected the request itself (4xx other than 401/403)."""


class SubmissionError(RequestError):
    """The archive or component could not be submitted for analysis."""


class ServiceUnavailable(TransportError):
    """Network failure or 5xx from the service."""


class ProtocolError(TransportError):
    """The response does not match the expected schema."""


class PollTimeoutError(WorkflowError):
    """The job did not reach a terminal state before the deadline."""

    def __init__(self, message, last_state=None, stage=None):
        super().__init__(message, stage=stage)
        self.last_state = last_state


class AnalysisFailedError(WorkflowError):
    """The service reported the analysis job as failed."""

    def __init__(self, message, reason=None, stage=None):
        super().__init__(message, stage=stage)
        self.reason = reason
