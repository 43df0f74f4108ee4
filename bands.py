"""GSM band classification by ARFCN.

A channel number (ARFCN) is mapped to a GSM band by walking an ordered table
of inclusive channel ranges and returning the band of the first range that
contains it. The table is kept exactly as published in the channel plan it
came from, including the GSM480/EGSM entries that share 306-340. Because the
scan is first-match-wins, EGSM is never returned; `overlapping_ranges`
reports such shadowed entries so callers can see them.

Containment is done on the channel number truncated toward zero, the way an
unsigned channel index compares. Negative and non-finite values never match.
"""

import enum
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

logger = logging.getLogger(__name__)


class Band(enum.Enum):
    UNCLASSIFIED = -1
    GSM450 = 0
    GSM480 = 1
    GSM750 = 2
    GSM850 = 3
    PGSM = 4
    EGSM = 5
    GSMR = 6
    DCS1800 = 7


@dataclass(frozen=True)
class ChannelRange:
    """Inclusive [min_channel, max_channel] interval of ARFCNs."""
    min_channel: int
    max_channel: int

    def __post_init__(self):
        if self.min_channel < 0 or self.max_channel < 0:
            raise ValueError("channel range bounds must be unsigned")
        if self.min_channel > self.max_channel:
            raise ValueError("min_channel must not exceed max_channel")

    def contains(self, channel: float) -> bool:
        if not math.isfinite(channel) or channel < 0:
            return False
        value = int(channel)
        return self.min_channel <= value <= self.max_channel

    def overlap(self, other: "ChannelRange") -> "ChannelRange | None":
        lo = max(self.min_channel, other.min_channel)
        hi = min(self.max_channel, other.max_channel)
        if lo > hi:
            return None
        return ChannelRange(lo, hi)


# Scan order matters: first match wins.
RANGE_TABLE: Tuple[Tuple[ChannelRange, Band], ...] = (
    (ChannelRange(259, 293), Band.GSM450),
    (ChannelRange(306, 340), Band.GSM480),
    (ChannelRange(438, 511), Band.GSM750),
    (ChannelRange(128, 251), Band.GSM850),
    (ChannelRange(1, 124), Band.PGSM),
    (ChannelRange(306, 340), Band.EGSM),
    (ChannelRange(940, 974), Band.GSMR),
    (ChannelRange(512, 885), Band.DCS1800),
)


def classify(channel: float, table: Iterable[Tuple[ChannelRange, Band]] = RANGE_TABLE) -> Band:
    """Return the band of the first range containing `channel`.

    Returns Band.UNCLASSIFIED when nothing matches; this is a normal outcome,
    not an error.
    """
    for channel_range, band in table:
        if channel_range.contains(channel):
            return band
    return Band.UNCLASSIFIED


def ranges_for_band(band: Band, table: Iterable[Tuple[ChannelRange, Band]] = RANGE_TABLE) -> List[ChannelRange]:
    return [r for r, b in table if b is band]


def overlapping_ranges(table: Iterable[Tuple[ChannelRange, Band]] = RANGE_TABLE) -> List[Tuple[Band, Band, ChannelRange]]:
    """List (earlier band, later band, shared range) for entries of distinct bands that overlap.

    The earlier band shadows the later one inside the shared range.
    """
    entries = list(table)
    found: List[Tuple[Band, Band, ChannelRange]] = []
    for i, (r_a, b_a) in enumerate(entries):
        for r_b, b_b in entries[i + 1:]:
            if b_a is b_b:
                continue
            shared = r_a.overlap(r_b)
            if shared is not None:
                found.append((b_a, b_b, shared))
    return found


def band_from_name(name: str) -> Band:
    key = name.strip().upper().replace("-", "").replace(" ", "")
    try:
        band = Band[key]
    except KeyError:
        raise ValueError(f"Unknown GSM band name: {name!r}") from None
    if band is Band.UNCLASSIFIED:
        raise ValueError("UNCLASSIFIED is not a GSM band")
    return band


def log_table_overlaps(level: int = logging.DEBUG) -> None:
    """Log every shadowed range in the default table."""
    for first, second, shared in overlapping_ranges():
        logger.log(
            level,
            f"Channel range {shared.min_channel}-{shared.max_channel} of {second.name} "
            f"is shadowed by {first.name}",
        )
