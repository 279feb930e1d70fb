"""Analysis job model."""

import enum
from dataclasses import dataclass


class JobState(enum.Enum):
    """Lifecycle of a remote analysis job."""

    SUBMITTED = "submitted"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
    # Reached only by the local poll loop, never reported by the service
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self):
        return self in (JobState.COMPLETED, JobState.FAILED, JobState.TIMED_OUT)


# Remote status strings, lowercased
REMOTE_STATES = {
    'queued': JobState.SUBMITTED,
    'pending': JobState.SUBMITTED,
    'submitted': JobState.SUBMITTED,
    'uploaded': JobState.SUBMITTED,
    'running': JobState.RUNNING,
    'processing': JobState.RUNNING,
    'analyzing': JobState.RUNNING,
    'completed': JobState.COMPLETED,
    'done': JobState.COMPLETED,
    'finished': JobState.COMPLETED,
    'success': JobState.COMPLETED,
    'failed': JobState.FAILED,
    'error': JobState.FAILED,
    'canceled': JobState.FAILED,
}


@dataclass(frozen=True)
class JobHandle:
    """Identifier of an in-flight analysis."""

    job_id: str
    component_id: int

    def to_dict(self):
        """Convert to dictionary."""
        return {'job_id': self.job_id, 'component_id': self.component_id}
