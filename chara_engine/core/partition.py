"""
partition.py
============
Period nodes and proportional subdivision of a period into sub-periods.

All boundaries are whole calendar days and both ends of a period are
inclusive. A parent of N days starting on S covers S .. S + N - 1, and its
children tile that range exactly:

    children[0].start  == parent.start
    children[-1].end   == parent.end
    children[i].end + 1 == children[i + 1].start

Each child except the last takes floor(N * weight / total_weight) days
(at least one). The last child is not sized proportionally; it always closes
on the parent's end date and so absorbs the rounding left over by the others.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_EVEN
from typing import List, Optional, Sequence, Tuple

from .errors import EmptyPartitionError
from .signs import Sign

DAYS_PER_YEAR = Decimal("365.25")


# ---------------------------------------------------------------------------
# Period node
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PeriodNode:
    sign: Sign
    start: date             # inclusive
    end: date               # inclusive
    level: int = 1          # 1 = mahadasha, 2 = antardasha, ...
    children: Tuple["PeriodNode", ...] = ()

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"period ends before it starts: {self.start} > {self.end}")

    @property
    def duration_days(self) -> int:
        return (self.end - self.start).days + 1

    @property
    def lord(self) -> str:
        return self.sign.lord

    def contains(self, on_date: date) -> bool:
        return self.start <= on_date <= self.end

    def progress_percent(self, as_of: date) -> float:
        """Share of the period elapsed before `as_of`, 0–100."""
        elapsed = min(max((as_of - self.start).days, 0), self.duration_days)
        return round(elapsed / self.duration_days * 100.0, 2)

    def remaining_days(self, as_of: date) -> int:
        """Days left in the period, counting `as_of` itself."""
        if as_of > self.end:
            return 0
        if as_of < self.start:
            return self.duration_days
        return (self.end - as_of).days + 1

    def active_child(self, on_date: date) -> Optional["PeriodNode"]:
        return find_active(self.children, on_date)

    def to_dict(self) -> dict:
        return {
            "sign": self.sign.name,
            "lord": self.sign.lord,
            "level": self.level,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "duration_days": self.duration_days,
            "children": [child.to_dict() for child in self.children],
        }


def find_active(nodes: Sequence[PeriodNode], on_date: date) -> Optional[PeriodNode]:
    """Binary search over chronologically ordered, non-overlapping nodes."""
    lo, hi = 0, len(nodes)
    while lo < hi:
        mid = (lo + hi) // 2
        if nodes[mid].end < on_date:
            lo = mid + 1
        else:
            hi = mid
    if lo < len(nodes) and nodes[lo].contains(on_date):
        return nodes[lo]
    return None


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def years_to_days(years) -> int:
    """Whole days in `years` of 365.25 days, rounded half-to-even, at least 1."""
    days = (Decimal(str(years)) * DAYS_PER_YEAR).quantize(Decimal(1), rounding=ROUND_HALF_EVEN)
    return max(1, int(days))


# ---------------------------------------------------------------------------
# Core partition
# ---------------------------------------------------------------------------

def partition(start_date: date, total_days: int,
              weighted_signs: Sequence[Tuple[Sign, int]],
              level: int = 2) -> List[PeriodNode]:
    """
    Split `total_days` starting on `start_date` among `weighted_signs`.

    Args:
        start_date: First day of the parent period
        total_days: Length of the parent period in days (>= 1)
        weighted_signs: Ordered (sign, weight) pairs; weight is the sign's
            dasha years at this level
        level: Depth assigned to the produced nodes

    Returns:
        Contiguous nodes covering start_date .. start_date + total_days - 1.
        Fewer nodes than signs are returned when the period is too short to
        give every sign at least one day.
    """
    if total_days < 1:
        raise ValueError(f"total_days must be at least 1, got {total_days}")
    if any(weight < 0 for _, weight in weighted_signs):
        raise ValueError("weights must be non-negative")

    total_weight = sum(weight for _, weight in weighted_signs)
    if total_weight == 0:
        raise EmptyPartitionError(
            f"cannot partition {total_days} days over a total weight of zero")

    closing = start_date + timedelta(days=total_days - 1)
    last = len(weighted_signs) - 1
    nodes = []
    cursor = start_date

    for i, (sign, weight) in enumerate(weighted_signs):
        if i == last:
            end = closing
        else:
            share = max(1, total_days * weight // total_weight)
            end = min(cursor + timedelta(days=share - 1), closing)

        nodes.append(PeriodNode(sign, cursor, end, level))

        if end >= closing:
            break
        cursor = end + timedelta(days=1)

    return nodes
