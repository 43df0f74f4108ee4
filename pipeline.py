"""Classify-then-convert pipeline.

`classify_and_convert` never raises for numeric input: a channel that matches
no band comes back as a result carrying ERR_UNCLASSIFIED_BAND, so one bad
channel does not abort a batch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .bands import Band, classify
from .formulas import FrequencyPair, UnclassifiedBandError, convert

logger = logging.getLogger(__name__)

# Per-channel error codes
ERR_UNCLASSIFIED_BAND = "UnclassifiedBand"
ERR_MALFORMED_INPUT = "MalformedInput"


@dataclass(frozen=True)
class ConversionResult:
    channel: float | None
    band: Band
    frequencies: FrequencyPair | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def malformed_result() -> ConversionResult:
    return ConversionResult(channel=None, band=Band.UNCLASSIFIED, error=ERR_MALFORMED_INPUT)


def classify_and_convert(channel: float) -> ConversionResult:
    """Classify and convert one channel.

    The channel is rounded to single precision once, so the band lookup and
    the frequency formulas see the same value.
    """
    channel = np.float32(channel)
    band = classify(channel)
    try:
        pair = convert(band, channel)
    except UnclassifiedBandError:
        logger.warning(f"Channel {channel} matches no GSM band")
        return ConversionResult(channel=channel, band=band, error=ERR_UNCLASSIFIED_BAND)
    logger.debug(f"Channel {channel} -> {band.name} UL {pair.uplink_mhz} DL {pair.downlink_mhz}")
    return ConversionResult(channel=channel, band=band, frequencies=pair)


def convert_batch(channels: Iterable[float]) -> List[ConversionResult]:
    """One result per channel, in input order."""
    return [classify_and_convert(ch) for ch in channels]
