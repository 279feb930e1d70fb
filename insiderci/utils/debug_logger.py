"""Debug logging to file with live updates."""

from datetime import datetime

class DebugLogger:
    """Logger that writes workflow progress to a file and optionally the console.

    Never pass credentials or session tokens to ``log``.
    """

    def __init__(self, log_file_path=None, console_debug=False):
        """Initialize the debug logger.

        Args:
            log_file_path (str, optional): Path to the debug log file. Console only when omitted.
            console_debug (bool): Whether to also print to console
        """
        self.log_file_path = log_file_path
        self.console_debug = console_debug
        self.file_handle = None

        if log_file_path:
            # Line buffering for live updates
            try:
                self.file_handle = open(log_file_path, 'w', encoding='utf-8', buffering=1)
                self.log(f"Debug log started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
                self.log("="*80)
            except OSError as e:
                print(f"Warning: Could not open debug log file: {e}")

    def log(self, message):
        """Write a message to the debug log.

        Args:
            message (str): Message to log
        """
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        log_line = f"[{timestamp}] {message}"

        if self.file_handle:
            try:
                self.file_handle.write(log_line + '\n')
                self.file_handle.flush()
            except OSError as e:
                print(f"Warning: Failed to write to debug log: {e}")

        if self.console_debug:
            print(message)

    def close(self):
        """Close the log file."""
        if self.file_handle:
            try:
                self.log("="*80)
                self.log(f"Debug log ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
                self.file_handle.close()
            except OSError:
                pass
            self.file_handle = None

    def __del__(self):
        """Ensure file is closed on destruction."""
        self.close()
