import random

import numpy as np

from gsm_arfcn.bands import Band
from gsm_arfcn.loaders import parse_channel_token
from gsm_arfcn.pipeline import (
    ERR_UNCLASSIFIED_BAND,
    classify_and_convert,
    convert_batch,
)


def test_classify_and_convert_success():
    res = classify_and_convert(512)
    assert res.ok
    assert res.band == Band.DCS1800
    assert abs(float(res.frequencies.downlink_mhz) - 1805.2) < 1e-3


def test_unmatched_channel_returns_error():
    res = classify_and_convert(125)
    assert not res.ok
    assert res.error == ERR_UNCLASSIFIED_BAND
    assert res.band == Band.UNCLASSIFIED
    assert res.frequencies is None


def test_idempotent():
    a = classify_and_convert(300)
    b = classify_and_convert(300)
    assert a == b
    assert a.frequencies.uplink_mhz.tobytes() == b.frequencies.uplink_mhz.tobytes()


def test_batch_preserves_order_and_isolates_failures():
    channels = [1, 125, 259, 2000, 940]
    results = convert_batch(channels)
    assert [r.channel for r in results] == channels
    assert [r.ok for r in results] == [True, False, True, False, True]


def test_order_independence():
    channels = [float(n) for n in range(0, 1100, 7)]
    sequential = convert_batch(channels)
    indexed = list(enumerate(channels))
    random.Random(1234).shuffle(indexed)
    shuffled = [(i, classify_and_convert(ch)) for i, ch in indexed]
    shuffled.sort(key=lambda t: t[0])
    assert [r for _, r in shuffled] == sequential


def test_band_and_frequency_use_same_single_precision_channel():
    # 124.99999999 rounds to 125.0 in single precision, which is in the P-GSM/GSM850 gap
    res = classify_and_convert(parse_channel_token("124.99999999"))
    assert res.channel == np.float32(125.0)
    assert res.band == Band.UNCLASSIFIED
    assert res.error == ERR_UNCLASSIFIED_BAND

    res = classify_and_convert(parse_channel_token("127.99999999"))
    assert res.band == Band.GSM850
    assert float(res.frequencies.uplink_mhz) == float(np.float32(824.2))
