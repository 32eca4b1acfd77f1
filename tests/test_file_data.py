import pytest

from cbgui.file_data import FileData


def test_hex_string_format():
    data = FileData("a.bin", b"\x00\xff\x10")
    assert data.bin_as_hex_string() == "0x00 0xff 0x10"


def test_hex_string_empty():
    assert FileData("empty", b"").bin_as_hex_string() == ""


@pytest.mark.parametrize("payload", [b"\x01", b"abc", bytes(range(256))])
def test_hex_string_tokens_round_trip(payload):
    tokens = FileData("x", payload).bin_as_hex_string().split(" ")
    assert len(tokens) == len(payload)
    assert bytes(int(token, 16) for token in tokens) == payload
    assert all(len(token) == 4 and token.startswith("0x") for token in tokens)


@pytest.mark.parametrize("text", ["hello", "zażółć gęślą jaźń", "line1\nline2", ""])
def test_content_as_string_round_trip(text):
    assert FileData("t.txt", text.encode("utf-8")).content_as_string() == text


def test_content_as_string_is_lossy_for_invalid_utf8():
    assert FileData("bad", b"ok\xff").content_as_string() == "ok\ufffd"


def test_equality_compares_name_and_contents():
    assert FileData("a", b"1") == FileData("a", b"1")
    assert FileData("a", b"1") != FileData("b", b"1")
    assert FileData("a", b"1") != FileData("a", b"2")