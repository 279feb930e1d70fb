"""Archive upload operation."""

import os
from insiderci.operations.base import Operation
from insiderci.models.job import JobHandle
from insiderci.utils.errors import RequestError, SubmissionError, ProtocolError

UPLOAD_ENDPOINT = '/sast/upload/{component_id}'

class JobSubmitter(Operation):
    """Upload an archived codebase for analysis of one component."""

    def execute(self, session, archive_path, component_id):
        """Submit the archive and return the job handle.

        Args:
            session (Session): Authenticated session
            archive_path (str): Path to the zip archive
            component_id (int): Remote component identifier

        Returns:
            JobHandle: Handle of the started analysis

        Raises:
            SubmissionError: On an invalid component or archive, or when the service rejects the upload
        """
        # bool is an int subclass
        if isinstance(component_id, bool) or not isinstance(component_id, int) or component_id <= 0:
            raise SubmissionError(f"Invalid component ID: {component_id!r} (must be a positive integer)")
        if not os.path.isfile(archive_path):
            raise SubmissionError(f"Archive not found: {archive_path}")

        endpoint = UPLOAD_ENDPOINT.format(component_id=component_id)
        size = os.path.getsize(archive_path)
        self.log(f"Uploading {archive_path} ({size} bytes) for component {component_id}")

        try:
            with open(archive_path, 'rb') as archive:
                files = {'file': (os.path.basename(archive_path), archive, 'application/zip')}
                response = self.api_client.send('POST', endpoint, files=files, session=session)
        except RequestError as e:
            # Remote message verbatim
            raise SubmissionError(e.message, status_code=e.status_code) from e

        job_id = (response.get('id') or
                  response.get('jobId') or
                  response.get('analysisId'))
        if not job_id:
            raise ProtocolError(f"No job id in upload response. Response keys: {list(response.keys())}")

        self.log(f"Analysis started: job {job_id}")
        return JobHandle(job_id=str(job_id), component_id=component_id)
