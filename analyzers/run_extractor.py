import math
from typing import Any, Optional

from models.fonts import ResolvedFont
from models.settings import ExtractionPolicy
from utils.logger import setup_logger

logger = setup_logger(__name__)

class TextRunExtractor:
    """
    Resolves the font family and size of a single text run.

    Resolution never fails: an unreadable family or size is replaced by the
    fallback from the extraction policy, so one malformed run cannot abort
    the aggregation of its page.
    """

    def __init__(self, policy: Optional[ExtractionPolicy] = None):
        """
        Initialize the extractor.

        Args:
            policy: Fallback policy (defaults to "Default" / 11pt)
        """
        self.policy = policy or ExtractionPolicy()

    def resolve(self, run) -> Optional[ResolvedFont]:
        """
        Resolve a run to a family and whole-point size.

        Args:
            run: Object exposing ``font_family``, ``font_size`` and ``length``

        Returns:
            ResolvedFont, or None for runs without any characters
        """
        if self._read(run, "length") == 0:
            return None

        return ResolvedFont(
            family=self._resolve_family(self._read(run, "font_family")),
            size=self._resolve_size(self._read(run, "font_size")),
        )

    def _read(self, run, attribute: str) -> Any:
        try:
            return getattr(run, attribute)
        except Exception as e:
            logger.debug(f"Unreadable run attribute '{attribute}': {e}")
            return None

    def _resolve_family(self, family: Any) -> str:
        if isinstance(family, str) and family.strip():
            return family.strip()
        return self.policy.fallback_family

    def _resolve_size(self, size: Any) -> int:
        if size is None or isinstance(size, bool):
            return self.policy.fallback_size
        try:
            value = float(size)
        except (ValueError, TypeError):
            logger.debug(f"Unreadable font size {size!r}; using fallback")
            return self.policy.fallback_size
        if not math.isfinite(value):
            return self.policy.fallback_size

        # Round half up: 12.5 -> 13
        rounded = math.floor(value + 0.5)
        if rounded <= 0:
            return self.policy.fallback_size
        return rounded
