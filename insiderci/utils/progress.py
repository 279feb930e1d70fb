"""Progress tracking utilities."""

from tqdm import tqdm
import sys

class PollProgress:
    """Status line for the poll loop, one tick per status check."""

    def __init__(self, total, enabled=True):
        """Initialize the poll progress display.

        Args:
            total (int): Maximum number of ticks
            enabled (bool): Disable to keep output quiet (tests, non-TTY logs)
        """
        self.bar = None
        if enabled:
            self.bar = tqdm(
                total=total,
                desc="Waiting for analysis",
                unit="checks",
                ncols=100,
                file=sys.stdout
            )

    def update(self, state):
        """Advance one tick and show the latest job state."""
        if self.bar:
            self.bar.update(1)
            self.bar.set_postfix(state=state)

    def write(self, message):
        """Print a message without interfering with the bar."""
        if self.bar:
            self.bar.write(message)
        else:
            print(message)

    def close(self):
        if self.bar:
            self.bar.close()
            self.bar = None


class StageTracker:
    """Track the workflow stages."""

    def __init__(self, enabled=True):
        """Initialize the stage tracker.

        Args:
            enabled (bool): Print stage banners
        """
        self.enabled = enabled
        self.stats = {}

    def start_stage(self, stage_name):
        """Start a new stage.

        Args:
            stage_name (str): Name of the stage
        """
        self.stats[stage_name] = {}
        if self.enabled:
            print(f"\n{'='*80}")
            print(f"Stage: {stage_name}")
            print(f"{'='*80}")

    def end_stage(self, stage_name, **stats):
        """End a stage and record statistics.

        Args:
            stage_name (str): Name of the stage
            **stats: Statistics to record
        """
        self.stats.setdefault(stage_name, {}).update(stats)

        if self.enabled:
            print(f"\n{stage_name} completed:")
            for key, value in stats.items():
                print(f"  - {key}: {value}")

    def get_stats(self):
        """Get all recorded statistics.

        Returns:
            dict: All statistics
        """
        return self.stats
