from gsm_arfcn.loaders import load_channel_lines, split_channel_lines, parse_channel_token


def test_split_skips_blank_lines_and_cr():
    text = "1 124\r\n\r\n  \n512   885\n"
    assert split_channel_lines(text) == [["1", "124"], ["512", "885"]]


def test_split_on_any_whitespace():
    assert split_channel_lines("10\t20  30") == [["10", "20", "30"]]


def test_load_channel_lines(tmp_path):
    p = tmp_path / "channels.txt"
    p.write_text("259 306\n\n975\n", encoding="utf-8")
    assert load_channel_lines(p) == [["259", "306"], ["975"]]


def test_parse_channel_token():
    assert parse_channel_token("512") == 512.0
    assert parse_channel_token("10.5") == 10.5
    assert parse_channel_token("abc") is None
    assert parse_channel_token("") is None


def test_parse_channel_token_rejects_non_numerals():
    assert parse_channel_token("1_000") is None
    assert parse_channel_token("inf") is None
    assert parse_channel_token("infinity") is None
    assert parse_channel_token("nan") is None
    assert parse_channel_token("0x10") is None
    assert parse_channel_token("1.") == 1.0
    assert parse_channel_token(".5") == 0.5
    assert parse_channel_token("-3") == -3.0
    assert parse_channel_token("5.12e2") == 512.0
