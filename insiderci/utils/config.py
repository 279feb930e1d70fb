import os
from dotenv import load_dotenv

def _env_number(name, cast, kind):
    """Parse a numeric environment variable.

    Raises:
        ValueError: With a message naming the variable
    """
    value = os.getenv(name)
    try:
        return cast(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be {kind} (got {value!r})")

class Config:
    def __init__(self):
        """Initialize configuration with default values."""
        # Authentication
        self.base_url = "https://api.insidersec.io"
        self.email = None
        self.password = None

        # Scan target
        self.component_id = 0

        # Pass/fail gate
        self.score_threshold = 0.0
        self.fail_on_score = True
        self.save_results = False

        # General
        self.debug = False

        # Polling (fixed interval between status checks)
        self.poll_interval = 10.0
        self.max_polling_time = 3600  # 1 hour in seconds
        self.max_poll_ticks = 360

        # API settings
        self.max_retries = 3
        self.retry_delay = 2.0
        self.request_timeout = 60

        # File paths
        self.output_directory = "."

        # Report assets
        self.style_url = "https://stackpath.bootstrapcdn.com/bootstrap/4.5.0/css/bootstrap.min.css"

    @classmethod
    def from_args(cls, args, config=None):
        """Create configuration from command line arguments.

        Args:
            args: Parsed command line arguments
            config (Config, optional): Existing configuration to override
        """
        config = config or cls()

        if getattr(args, 'base_url', None):
            config.base_url = args.base_url
        if getattr(args, 'email', None):
            config.email = args.email
        if getattr(args, 'password', None):
            config.password = args.password
        if getattr(args, 'component', None) is not None:
            config.component_id = args.component
        if getattr(args, 'score', None) is not None:
            config.score_threshold = args.score
        if getattr(args, 'no_fail', False):
            config.fail_on_score = False
        if getattr(args, 'save', False):
            config.save_results = True
        if getattr(args, 'debug', False):
            config.debug = True

        # Optional polling overrides
        if getattr(args, 'poll_interval', None) is not None:
            config.poll_interval = args.poll_interval
        if getattr(args, 'max_wait', None) is not None:
            config.max_polling_time = args.max_wait

        if getattr(args, 'output_dir', None):
            config.output_directory = args.output_dir

        return config

    @classmethod
    def from_env(cls, env_file='.env'):
        """Create configuration from environment variables.

        Args:
            env_file (str): Path to environment file (default: '.env')
        """
        load_dotenv(env_file)  # Load specified .env file if it exists

        config = cls()
        if os.getenv('INSIDER_BASE_URL'):
            config.base_url = os.getenv('INSIDER_BASE_URL')
        config.email = os.getenv('INSIDER_EMAIL')
        config.password = os.getenv('INSIDER_PASSWORD')
        config.debug = os.getenv('INSIDER_DEBUG', '').lower() == 'true'

        # Optional environment overrides
        if os.getenv('INSIDER_COMPONENT'):
            config.component_id = _env_number('INSIDER_COMPONENT', int, "an integer")
        if os.getenv('INSIDER_SCORE'):
            config.score_threshold = _env_number('INSIDER_SCORE', float, "a number")
        if os.getenv('INSIDER_POLL_INTERVAL'):
            config.poll_interval = _env_number('INSIDER_POLL_INTERVAL', float, "a number")
        if os.getenv('INSIDER_MAX_WAIT'):
            config.max_polling_time = _env_number('INSIDER_MAX_WAIT', float, "a number")
        if os.getenv('INSIDER_OUTPUT_DIR'):
            config.output_directory = os.getenv('INSIDER_OUTPUT_DIR')

        return config

    def validate(self):
        """Validate the configuration.

        Returns:
            tuple: (bool, str) - (is_valid, error_message)
        """
        if not self.base_url:
            return False, "Base URL is required"
        if not self.email:
            return False, "Email is required"
        if not self.password:
            return False, "Password is required"
        # bool is an int subclass
        if (isinstance(self.component_id, bool) or not isinstance(self.component_id, int)
                or self.component_id <= 0):
            return False, "Component ID must be a positive integer"
        if self.poll_interval <= 0:
            return False, "Poll interval must be positive"
        if self.max_polling_time <= 0:
            return False, "Maximum wait must be positive"
        if self.max_poll_ticks <= 0:
            return False, "Maximum poll ticks must be positive"
        return True, None
