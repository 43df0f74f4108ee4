"""Uplink/downlink carrier frequencies for GSM bands.

Each band has an uplink formula (ARFCN -> uplink MHz) and a downlink formula
that adds the band's duplex offset to the *uplink* result:

    GSM450   Fu = 450.6  + 0.2*(n - 259)      Fd = Fu + 10
    GSM480   Fu = 479.0  + 0.2*(n - 306)      Fd = Fu + 10
    GSM750   Fu = 747.2  + 0.2*(n - 438)      Fd = Fu + 30
    GSM850   Fu = 824.2  + 0.2*(n - 128)      Fd = Fu + 45
    P-GSM    Fu = 890.0  + 0.2*n              Fd = Fu + 45
    E-GSM    Fu = 890.0  + 0.2*(n - 1024)     Fd = Fu + 45
    GSM-R    Fu = 890.0  + 0.2*(n - 1024)     Fd = Fu + 45
    DCS1800  Fu = 1710.2 + 0.2*(n - 512)      Fd = Fu + 95

Arithmetic is done in single precision (numpy.float32) so results match the
published tables digit for digit at 6 significant figures.
"""

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np

from .bands import Band

_f32 = np.float32
_STEP_MHZ = _f32(0.2)


class UnclassifiedBandError(ValueError):
    """Raised when no frequency formula exists for a band."""

    def __init__(self, band: Band):
        super().__init__(f"No frequency formula for band {band.name}")
        self.band = band


@dataclass(frozen=True)
class FrequencyPair:
    uplink_mhz: np.float32
    downlink_mhz: np.float32


def _uplink(base_mhz: float, first_channel: int) -> Callable[[np.float32], np.float32]:
    base = _f32(base_mhz)
    first = _f32(first_channel)

    def fn(n: np.float32) -> np.float32:
        return base + _STEP_MHZ * (n - first)

    return fn


def _downlink(offset_mhz: float) -> Callable[[np.float32], np.float32]:
    offset = _f32(offset_mhz)

    def fn(u: np.float32) -> np.float32:
        return u + offset

    return fn


UPLINK_FORMULAS: Dict[Band, Callable[[np.float32], np.float32]] = {
    Band.GSM450: _uplink(450.6, 259),
    Band.GSM480: _uplink(479.0, 306),
    Band.GSM750: _uplink(747.2, 438),
    Band.GSM850: _uplink(824.2, 128),
    Band.PGSM: _uplink(890.0, 0),
    Band.EGSM: _uplink(890.0, 1024),
    Band.GSMR: _uplink(890.0, 1024),
    Band.DCS1800: _uplink(1710.2, 512),
}

DUPLEX_OFFSETS_MHZ: Dict[Band, float] = {
    Band.GSM450: 10.0,
    Band.GSM480: 10.0,
    Band.GSM750: 30.0,
    Band.GSM850: 45.0,
    Band.PGSM: 45.0,
    Band.EGSM: 45.0,
    Band.GSMR: 45.0,
    Band.DCS1800: 95.0,
}

DOWNLINK_FORMULAS: Dict[Band, Callable[[np.float32], np.float32]] = {
    band: _downlink(offset) for band, offset in DUPLEX_OFFSETS_MHZ.items()
}


def uplink_mhz(band: Band, channel: float) -> np.float32:
    fn = UPLINK_FORMULAS.get(band)
    if fn is None:
        raise UnclassifiedBandError(band)
    return fn(_f32(channel))


def downlink_mhz(band: Band, uplink: float) -> np.float32:
    """Downlink frequency from an uplink frequency (not from the channel number)."""
    fn = DOWNLINK_FORMULAS.get(band)
    if fn is None:
        raise UnclassifiedBandError(band)
    return fn(_f32(uplink))


def duplex_offset_mhz(band: Band) -> float:
    if band not in DUPLEX_OFFSETS_MHZ:
        raise UnclassifiedBandError(band)
    return DUPLEX_OFFSETS_MHZ[band]


def convert(band: Band, channel: float) -> FrequencyPair:
    """Compute (uplink, downlink) MHz for a channel already classified into `band`.

    Raises UnclassifiedBandError for Band.UNCLASSIFIED.
    """
    up = uplink_mhz(band, channel)
    down = downlink_mhz(band, up)
    return FrequencyPair(uplink_mhz=up, downlink_mhz=down)
