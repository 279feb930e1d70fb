"""Scan workflow: authenticate, submit, poll, map."""

import time
from insiderci.utils.api_client import APIClient
from insiderci.utils.auth import AuthManager
from insiderci.utils.errors import WorkflowError
from insiderci.utils.progress import StageTracker
from insiderci.operations.job_submitter import JobSubmitter
from insiderci.operations.job_poller import JobPoller
from insiderci.operations.result_mapper import ResultMapper

class ScanWorkflow:
    """Single entry point for one scan run.

    Each instance owns its config, client and logger; nothing is shared
    between instances, so several can run in one process.
    """

    def __init__(self, config, debug_logger=None, api_client=None,
                 clock=time.monotonic, sleep=time.sleep, show_progress=False):
        """Initialize the workflow.

        Args:
            config (Config): Configuration instance
            debug_logger (DebugLogger, optional): Debug logger instance
            api_client (APIClient, optional): Transport, built from config when omitted
            clock (callable): Clock passed to the poller
            sleep (callable): Sleep passed to the poller
            show_progress (bool): Print stage banners and the poll status line
        """
        self.config = config
        self.logger = debug_logger
        self.api_client = api_client or APIClient(config.base_url, config, config.debug, debug_logger)
        self.stages = StageTracker(enabled=show_progress)

        self.auth = AuthManager(self.api_client, config.debug, debug_logger)
        self.submitter = JobSubmitter(config, self.api_client, debug_logger)
        self.poller = JobPoller(config, self.api_client, debug_logger,
                                clock=clock, sleep=sleep, show_progress=show_progress)
        self.mapper = ResultMapper(config, self.api_client, debug_logger)

    def run(self, credentials, archive_path, component_id):
        """Run the full workflow.

        Args:
            credentials (Credentials): Login credentials
            archive_path (str): Path to the zip archive
            component_id (int): Remote component identifier

        Returns:
            Sast: Completed scan result

        Raises:
            WorkflowError: Any stage failure, with ``stage`` set. The remote
                job is not cancelled on a local timeout.
        """
        with self._stage('authenticate', "Authenticating"):
            session = self.auth.authenticate(credentials)

        with self._stage('submit', "Uploading archive"):
            handle = self.submitter.execute(session, archive_path, component_id)

        with self._stage('poll', "Waiting for analysis"):
            payload = self.poller.execute(session, handle)

        with self._stage('map', "Reading results"):
            sast = self.mapper.execute(payload)

        return sast

    def _stage(self, stage, title):
        return _StageContext(self, stage, title)


class _StageContext:
    """Tags any WorkflowError raised inside with the stage name."""

    def __init__(self, workflow, stage, title):
        self.workflow = workflow
        self.stage = stage
        self.title = title

    def __enter__(self):
        self.workflow.stages.start_stage(self.title)
        if self.workflow.logger:
            self.workflow.logger.log(f"Starting stage: {self.stage}")
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc is None:
            self.workflow.stages.end_stage(self.title, status="ok")
            return False
        if isinstance(exc, WorkflowError):
            exc.stage = self.stage
            if self.workflow.logger:
                self.workflow.logger.log(f"ERROR in stage {self.stage}: {type(exc).__name__}: {exc}")
        # Never suppress
        return False
