"""Job status polling operation."""

import time
from insiderci.operations.base import Operation
from insiderci.models.job import JobState, REMOTE_STATES
from insiderci.utils.errors import (
    ServiceUnavailable, ProtocolError, PollTimeoutError, AnalysisFailedError
)
from insiderci.utils.progress import PollProgress

STATUS_ENDPOINT = '/sast/status/{job_id}'

class JobPoller(Operation):
    """Wait for an analysis job to reach a terminal state."""

    def __init__(self, config, api_client=None, debug_logger=None,
                 clock=time.monotonic, sleep=time.sleep, show_progress=False):
        """Initialize the poller.

        Args:
            config (Config): Configuration instance
            api_client (APIClient, optional): API client instance
            debug_logger (DebugLogger, optional): Debug logger instance
            clock (callable): Monotonic clock in seconds
            sleep (callable): Blocking wait in seconds
            show_progress (bool): Show a tqdm status line while polling
        """
        super().__init__(config, api_client, debug_logger)
        self.clock = clock
        self.sleep = sleep
        self.show_progress = show_progress

    def execute(self, session, handle):
        """Poll until the job completes, fails, or the deadline passes.

        Uses a fixed interval (poll_interval) between status checks. A
        transient ServiceUnavailable is retried with exponential backoff
        (retry_delay * 2**n) up to max_retries consecutive failures. No wait
        extends past max_polling_time; the only slack is one in-flight
        request (request_timeout).

        Args:
            session (Session): Authenticated session
            handle (JobHandle): Job to wait for

        Returns:
            dict: Terminal status payload of a completed job

        Raises:
            PollTimeoutError: If max_polling_time or max_poll_ticks is exceeded
            AnalysisFailedError: If the service reports the job as failed
            ServiceUnavailable: After max_retries consecutive transient failures
        """
        endpoint = STATUS_ENDPOINT.format(job_id=handle.job_id)
        start_time = self.clock()
        deadline = start_time + self.config.max_polling_time
        ticks = 0
        failures = 0
        last_state = JobState.SUBMITTED

        progress = PollProgress(self.config.max_poll_ticks, enabled=self.show_progress)
        try:
            while True:
                elapsed = self.clock() - start_time
                if self.clock() >= deadline:
                    raise PollTimeoutError(
                        f"Analysis {handle.job_id} did not finish within {elapsed:.0f}s "
                        f"(last state: {last_state.value}); job abandoned",
                        last_state=last_state
                    )
                if ticks >= self.config.max_poll_ticks:
                    raise PollTimeoutError(
                        f"Analysis {handle.job_id} did not finish after {ticks} status checks "
                        f"(last state: {last_state.value}); job abandoned",
                        last_state=last_state
                    )

                try:
                    # A status request never runs past the deadline
                    timeout = min(self.config.request_timeout, deadline - self.clock())
                    response = self.api_client.send('GET', endpoint, session=session, timeout=timeout)
                except ServiceUnavailable as e:
                    failures += 1
                    if failures >= self.config.max_retries:
                        self.log(f"Status check failed {failures} times in a row, giving up: {e}")
                        raise
                    wait_time = self.config.retry_delay * (2 ** (failures - 1))
                    self.log(f"Status check failed ({e}). Retrying in {wait_time}s...")
                    self._wait(wait_time, deadline)
                    continue

                failures = 0
                ticks += 1
                last_state = self._parse_state(response)
                progress.update(last_state.value)

                if ticks == 1 or last_state.is_terminal:
                    self.log(f"Analysis {handle.job_id} state: {last_state.value} "
                             f"(check {ticks}, elapsed {elapsed:.1f}s)")

                if last_state == JobState.COMPLETED:
                    return response
                if last_state == JobState.FAILED:
                    reason = response.get('message') or response.get('reason')
                    raise AnalysisFailedError(
                        f"Analysis {handle.job_id} failed: {reason or 'no reason given'}",
                        reason=reason
                    )

                self._wait(self.config.poll_interval, deadline)
        finally:
            progress.close()

    def _wait(self, seconds, deadline):
        """Sleep, but never past the deadline."""
        remaining = deadline - self.clock()
        if remaining > 0:
            self.sleep(min(seconds, remaining))

    @staticmethod
    def _parse_state(response):
        status = response.get('status')
        if not isinstance(status, str):
            raise ProtocolError(f"Status response has no status field. Response keys: {list(response.keys())}")
        state = REMOTE_STATES.get(status.strip().lower())
        if state is None:
            raise ProtocolError(f"Unknown job status: {status!r}")
        return state
