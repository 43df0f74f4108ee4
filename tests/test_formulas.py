import numpy as np
import pytest

from gsm_arfcn.bands import Band
from gsm_arfcn.formulas import (
    FrequencyPair,
    UnclassifiedBandError,
    convert,
    uplink_mhz,
    downlink_mhz,
    duplex_offset_mhz,
)


def _close(a, b, rel=1e-4):
    return abs(float(a) - b) <= rel * abs(b)


def test_pgsm_channel_zero():
    pair = convert(Band.PGSM, 0)
    assert float(pair.uplink_mhz) == 890.0
    assert float(pair.downlink_mhz) == 935.0


def test_dcs1800_first_channel():
    pair = convert(Band.DCS1800, 512)
    assert _close(pair.uplink_mhz, 1710.2)
    assert _close(pair.downlink_mhz, 1805.2)


def test_gsm450_first_channel():
    pair = convert(Band.GSM450, 259)
    assert _close(pair.uplink_mhz, 450.6)
    assert _close(pair.downlink_mhz, 460.6)


def test_known_channels():
    assert _close(convert(Band.GSM480, 306).uplink_mhz, 479.0)
    assert _close(convert(Band.GSM480, 306).downlink_mhz, 489.0)
    assert _close(convert(Band.GSM750, 438).downlink_mhz, 777.2)
    assert _close(convert(Band.GSM850, 128).downlink_mhz, 869.2)
    assert _close(convert(Band.PGSM, 124).uplink_mhz, 914.8)
    assert _close(convert(Band.PGSM, 124).downlink_mhz, 959.8)
    assert _close(convert(Band.GSMR, 955).uplink_mhz, 876.2)
    assert _close(convert(Band.GSMR, 955).downlink_mhz, 921.2)
    assert _close(convert(Band.EGSM, 975).uplink_mhz, 880.2)
    assert _close(convert(Band.DCS1800, 885).downlink_mhz, 1879.8)


def test_single_precision():
    pair = convert(Band.DCS1800, 600)
    assert isinstance(pair.uplink_mhz, np.float32)
    assert isinstance(pair.downlink_mhz, np.float32)


def test_downlink_is_offset_from_uplink():
    for band in (Band.GSM450, Band.GSM750, Band.GSM850, Band.DCS1800):
        up = uplink_mhz(band, 300)
        assert downlink_mhz(band, up) == convert(band, 300).downlink_mhz
        assert _close(convert(band, 300).downlink_mhz - up, duplex_offset_mhz(band))


def test_fractional_channel_passes_through():
    assert _close(convert(Band.PGSM, 10.5).uplink_mhz, 892.1)


def test_unclassified_band_raises():
    with pytest.raises(UnclassifiedBandError):
        convert(Band.UNCLASSIFIED, 5)
    with pytest.raises(ValueError):
        uplink_mhz(Band.UNCLASSIFIED, 5)
    with pytest.raises(UnclassifiedBandError):
        duplex_offset_mhz(Band.UNCLASSIFIED)


def test_repeatable():
    a = convert(Band.GSM850, 190)
    b = convert(Band.GSM850, 190)
    assert a == b
    assert isinstance(a, FrequencyPair)
