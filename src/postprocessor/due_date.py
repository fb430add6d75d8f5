"""
Due Date Resolver Module.

This module converts the 4-digit due-date factor into a calendar date.

A factor F maps to ``epoch + (F - base_factor)`` days. The documented
pair is (1997-10-07, 1000). The 4-digit range ran out in 2025, after
which counting restarts from a new pair; every pair is configuration
(``due_date.epochs`` in settings.yaml), not code.

Author: ML Engineering Team
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from config import get_config
from src.utils.exceptions import ConfigurationError
from src.utils.helpers import parse_iso_date
from src.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

MAX_FACTOR = 9999


@dataclass(frozen=True)
class FactorEpoch:
    """
    One (epoch, base factor) pair.

    Attributes:
        epoch: Date denoted by `base_factor`
        base_factor: Factor that maps to `epoch` (0-9999)
        in_force_from: First reference date this pair applies to;
                       defaults to `epoch`

    Example:
        >>> FactorEpoch(date(1997, 10, 7), 1000).to_date(1001)
        datetime.date(1997, 10, 8)
    """
    epoch: date
    base_factor: int = 1000
    in_force_from: Optional[date] = None

    def __post_init__(self):
        if not 0 <= self.base_factor <= MAX_FACTOR:
            raise ConfigurationError(
                "due_date.base_factor",
                f"{self.base_factor} is outside 0-{MAX_FACTOR}"
            )

    @property
    def effective_from(self) -> date:
        return self.in_force_from or self.epoch

    def to_date(self, factor: int) -> date:
        """Calendar date denoted by `factor` under this pair."""
        return self.epoch + timedelta(days=factor - self.base_factor)

    def to_factor(self, due_date: date) -> int:
        """
        Inverse of to_date().

        Raises:
            ValueError: If the date is not representable by a 1-9999 factor.
        """
        factor = (due_date - self.epoch).days + self.base_factor
        if not 1 <= factor <= MAX_FACTOR:
            raise ValueError(f"{due_date.isoformat()} has no factor under epoch {self.epoch}")
        return factor

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FactorEpoch':
        """
        Build from a settings.yaml entry.

        Raises:
            ConfigurationError: If the entry is incomplete or malformed.
        """
        if not isinstance(data, dict):
            raise ConfigurationError("due_date.epochs", f"{data!r}: expected a mapping")
        try:
            in_force_from = data.get('in_force_from')
            return cls(
                epoch=parse_iso_date(data['epoch']),
                base_factor=int(data.get('base_factor', 1000)),
                in_force_from=parse_iso_date(in_force_from) if in_force_from else None
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError("due_date.epochs", f"{data!r}: {e}") from e


DOCUMENTED_EPOCH = FactorEpoch(date(1997, 10, 7), 1000)

# Source application behaviour: raw day offset, factor 0 is the epoch.
LEGACY_EPOCH = FactorEpoch(date(1997, 10, 7), 0)


class DueDateResolver:
    """
    Resolves due-date factors against a schedule of FactorEpochs.

    The pair in force is the latest one whose `effective_from` is on or
    before the reference date. The reference date is today unless one
    is given to the constructor or to resolve().

    Selection looks at the reference date only, never at the factor.
    A slip issued under an earlier pair but read after a later pair took
    effect resolves under the later one: factor 9990 (2022-05-19 under
    the 1997 pair) read on 2025-03-01 resolves to 2049-10-04.
    Pass the issue-time reference date when decoding such slips.

    Attributes:
        epochs: Schedule sorted by effective_from
        reference_date: Fixed reference date, or None for today

    Example:
        >>> resolver = DueDateResolver([DOCUMENTED_EPOCH])
        >>> resolver.resolve(1000)
        datetime.date(1997, 10, 7)
        >>> resolver.resolve(0) is None
        True
    """

    def __init__(
        self,
        epochs: Optional[Sequence[FactorEpoch]] = None,
        reference_date: Optional[date] = None
    ) -> None:
        """
        Initialize the resolver.

        Args:
            epochs: Explicit schedule. Loaded from configuration if None.
            reference_date: Fixed reference date used to pick the pair.

        Raises:
            ConfigurationError: If the schedule is empty.
        """
        if epochs is None:
            epochs = self.epochs_from_config()
        if not epochs:
            raise ConfigurationError("due_date.epochs", "at least one epoch is required")

        self.epochs = tuple(sorted(epochs, key=lambda e: e.effective_from))
        self.reference_date = reference_date

        logger.debug(f"DueDateResolver initialized with {len(self.epochs)} epoch(s)")

    @staticmethod
    def epochs_from_config() -> List[FactorEpoch]:
        """
        Read the epoch schedule from settings.yaml.

        Returns:
            List of FactorEpoch; [LEGACY_EPOCH] when legacy_mode is set,
            [DOCUMENTED_EPOCH] when no schedule is configured.
        """
        if get_config("due_date.legacy_mode", False):
            logger.info("Due-date legacy mode enabled (raw offset from 1997-10-07)")
            return [LEGACY_EPOCH]

        entries = get_config("due_date.epochs")
        if entries is None:
            return [DOCUMENTED_EPOCH]
        if not isinstance(entries, list):
            raise ConfigurationError("due_date.epochs", "expected a list of epochs")

        return [FactorEpoch.from_dict(entry) for entry in entries]

    def epoch_for(self, reference_date: Optional[date] = None) -> FactorEpoch:
        """
        Pick the pair in force on the reference date.

        Falls back to the earliest pair when the reference date precedes
        every entry.
        """
        reference = reference_date or self.reference_date or date.today()
        in_force = [e for e in self.epochs if e.effective_from <= reference]
        return in_force[-1] if in_force else self.epochs[0]

    def resolve(self, factor: int, reference_date: Optional[date] = None) -> Optional[date]:
        """
        Convert a due-date factor to a calendar date.

        Args:
            factor: Factor 0-9999.
            reference_date: Overrides the resolver's reference date.

        Returns:
            The due date, or None when the factor is 0 (not specified).

        Raises:
            ValueError: If the factor is outside 0-9999.
        """
        if not 0 <= factor <= MAX_FACTOR:
            raise ValueError(f"Due-date factor out of range: {factor}")
        if factor == 0:
            return None
        return self.epoch_for(reference_date).to_date(factor)
