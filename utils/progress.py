import sys
import time
from typing import Optional, TextIO

class ProgressTracker:
    """
    Prints a single-line progress counter while pages are scanned.

    Attributes:
        total: Total number of pages
        current: Pages scanned so far
        description: Label printed before the counter
        start_time: Start time of the scan
    """

    def __init__(self, total_steps: int, description: str, stream: Optional[TextIO] = None):
        """
        Initialize progress tracker.

        Args:
            total_steps: Total number of steps to track
            description: Description of the operation
            stream: Output stream (defaults to stdout)
        """
        self.total = total_steps
        self.current = 0
        self.description = description
        self.stream = stream or sys.stdout
        self.start_time = time.time()
        self._print_progress()

    def update(self, steps: int = 1) -> None:
        """Advance the counter by ``steps``."""
        self.current = min(self.current + steps, self.total)
        self._print_progress()

    def _print_progress(self) -> None:
        percentage = (self.current / self.total) * 100 if self.total > 0 else 0
        elapsed_time = time.time() - self.start_time
        self.stream.write(
            f"\r{self.description}: [{self.current}/{self.total}] "
            f"{percentage:.1f}% (Elapsed: {elapsed_time:.1f}s)"
        )
        self.stream.flush()

    def complete(self) -> None:
        """Mark progress as complete."""
        self.current = self.total
        self._print_progress()
        self.stream.write("\n")
        self.stream.flush()
