from dataclasses import dataclass
from insiderci.utils.errors import AuthError, ProtocolError

LOGIN_ENDPOINT = '/auth/login'


@dataclass(frozen=True)
class Credentials:
    """Email/password pair provided once per run."""

    email: str
    password: str

    def __repr__(self):
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class Session:
    """Authenticated capability attached to every authorized call."""

    token: str

    def get_headers(self):
        """Get headers with authentication token for API requests."""
        return {'Authorization': f'Bearer {self.token}'}

    def __repr__(self):
        return "Session(token='***')"


class AuthManager:
    def __init__(self, api_client, debug=False, debug_logger=None):
        """Initialize the authentication manager.

        Args:
            api_client (APIClient): Transport used for the login call
            debug (bool, optional): Enable debug output. Defaults to False.
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.api_client = api_client
        self.debug = debug
        self.logger = debug_logger

    def authenticate(self, credentials):
        """Log in once and return a Session. Sessions are never refreshed."""
        if not credentials.email or not credentials.password:
            raise AuthError("Email and password are required")

        if self.logger:
            self.logger.log(f"Authenticating as {credentials.email}...")

        response = self.api_client.send(
            'POST',
            LOGIN_ENDPOINT,
            json_data={'email': credentials.email, 'password': credentials.password}
        )

        token = response.get('token') or response.get('access_token')
        if not token:
            raise ProtocolError(f"No token in login response. Response keys: {list(response.keys())}")

        if self.logger:
            self.logger.log("Authentication successful")
        return Session(token=str(token))
