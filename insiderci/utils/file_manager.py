"""File management utilities."""

import os

class FileManager:
    """Resolve result and log paths for a component."""

    def __init__(self, config, debug=False):
        """Initialize the file manager.

        Args:
            config (Config): Configuration instance
            debug (bool): Enable debug output
        """
        self.config = config
        self.debug = debug

    def setup_directories(self):
        """Create the output directory."""
        os.makedirs(self.config.output_directory, exist_ok=True)

        if self.debug:
            print(f"Output directory: {self.config.output_directory}")

    def get_result_path(self, component_id, extension):
        """Path of result-<component>.<extension>."""
        return os.path.join(self.config.output_directory, f"result-{component_id}.{extension}")

    def get_style_path(self):
        return os.path.join(self.config.output_directory, "style.css")

    def get_debug_log_path(self, component_id):
        """Generate the debug log file path.

        Returns:
            str: Full path to debug log file
        """
        return os.path.join(self.config.output_directory, f"insiderci-{component_id}_debug.txt")
