class Operation:
    """Base class for all workflow operations."""

    def __init__(self, config, api_client=None, debug_logger=None):
        """Initialize the operation.

        Args:
            config (Config): Configuration instance
            api_client (APIClient, optional): API client instance
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.config = config
        self.api_client = api_client
        self.logger = debug_logger

    def log(self, message):
        if self.logger:
            self.logger.log(message)

    def execute(self, *args, **kwargs):
        """Execute the operation.

        This method should be overridden by specific operations.
        """
        raise NotImplementedError("Operation must implement execute method")
