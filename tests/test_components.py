from cbgui.components import file_card, file_details
from cbgui.file_data import FileData


def test_details_show_name_size_text_and_hex():
    data = FileData("notes.txt", b"hi!")
    html = str(file_details(data))
    assert "notes.txt" in html
    assert f"{len(data.contents)} bytes" in html
    assert data.content_as_string() in html
    assert data.bin_as_hex_string() in html
    assert "Hex View" in html


def test_details_escape_user_content():
    data = FileData("<b>x</b>", b"<script>alert(1)</script>")
    html = str(file_details(data))
    assert "<b>x</b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "<script>" not in html


def test_card_without_file_disables_download():
    html = str(file_card("encrypted", None))
    assert "Download File</button>" in html
    assert "disabled" in html
    assert "Hex View" not in html
    assert 'action="/file/encrypted/upload"' in html
    assert 'action="/file/encrypted/download"' in html


def test_card_with_file_enables_download_and_shows_details():
    data = FileData("d.bin", b"\x01\x02")
    html = str(file_card("decrypted", data))
    assert "disabled" not in html
    assert str(file_details(data)) in html
    assert 'action="/file/decrypted/upload"' in html