"""HTTP client for the Insider API with response classification."""

import requests
from insiderci.utils.errors import AuthError, RequestError, ServiceUnavailable, ProtocolError

class APIClient:
    """Issues single HTTP requests and decodes JSON envelopes.

    No retries happen here. Retry policy belongs to the poller only.
    """

    def __init__(self, base_url, config, debug=False, debug_logger=None):
        """Initialize the API client.

        Args:
            base_url (str): The base URL for API requests
            config (Config): Configuration instance
            debug (bool): Enable debug output
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.base_url = base_url.rstrip('/')
        self.config = config
        self.debug = debug
        self.logger = debug_logger

    def send(self, method, endpoint, json_data=None, files=None, session=None, timeout=None):
        """Send one request and return the decoded JSON object.

        Args:
            method (str): HTTP method
            endpoint (str): API endpoint path
            json_data (dict, optional): JSON body
            files (dict, optional): Multipart file parts
            session (Session, optional): Authenticated session
            timeout (float, optional): Overrides config.request_timeout

        Returns:
            dict: Decoded response body

        Raises:
            AuthError: On 401/403
            RequestError: On any other 4xx
            ServiceUnavailable: On 5xx, timeouts and connection failures
            ProtocolError: When a 2xx body is not a JSON object
        """
        url = f"{self.base_url}{endpoint}"
        headers = {'Accept': 'application/json'}
        if session is not None:
            headers.update(session.get_headers())

        if self.logger:
            self.logger.log(f"  {method} {endpoint}")

        try:
            response = requests.request(
                method,
                url,
                headers=headers,
                json=json_data,
                files=files,
                timeout=timeout if timeout is not None else self.config.request_timeout
            )
        except requests.exceptions.Timeout as e:
            raise ServiceUnavailable(f"Request to {endpoint} timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise ServiceUnavailable(f"Request to {endpoint} failed: {e}")

        status = response.status_code
        if status in (401, 403):
            raise AuthError(self._remote_message(response), status_code=status)
        if 400 <= status < 500:
            raise RequestError(self._remote_message(response), status_code=status)
        if status >= 500:
            raise ServiceUnavailable(
                f"Service returned {status}: {self._remote_message(response)}",
                status_code=status
            )

        try:
            body = response.json()
        except ValueError:
            raise ProtocolError(f"Response from {endpoint} is not valid JSON", status_code=status)

        if not isinstance(body, dict):
            raise ProtocolError(
                f"Response from {endpoint} is not a JSON object (got {type(body).__name__})",
                status_code=status
            )
        return body

    @staticmethod
    def _remote_message(response):
        """Extract the service's own error message, verbatim when possible."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            message = body.get('message') or body.get('error')
            if message:
                return str(message)

        text = (response.text or '').strip()
        return text or f"HTTP {response.status_code}"
