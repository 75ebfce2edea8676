import pytest

from rmsgateway.messages import (
    UserStats,
    format_greeting,
    format_logon,
    format_logout,
    read_banner,
)


def test_greeting_layout():
    text = format_greeting("N0CALL", "pkg", "1.0", "Jan  1 2024", "FN20")
    assert text == "\nN0CALL - pkg 1.0 Jan  1 2024 (FN20)\n\n"


def test_banner_round_trip(tmp_path):
    content = "Welcome\nto the gateway\n\nbye\n"
    path = tmp_path / "banner"
    path.write_text(content)
    pieces = read_banner(path, 80)
    assert "".join(pieces) == content
    assert len(pieces) == content.count("\n")


def test_banner_long_lines_are_split(tmp_path):
    content = "x" * 25 + "\nshort\n"
    path = tmp_path / "banner"
    path.write_text(content)
    pieces = read_banner(path, 10)
    assert "".join(pieces) == content
    assert all(len(p) <= 9 for p in pieces)
    assert len(pieces) > 2


def test_banner_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_banner(tmp_path / "missing", 80)


def test_banner_bad_length(tmp_path):
    path = tmp_path / "banner"
    path.write_text("hi\n")
    with pytest.raises(ValueError):
        read_banner(path, 1)


def test_logon_truncates_usercall():
    text = format_logon("ABCDEFGHIJKL", "ax0", "cms.example.com")
    assert text == "Login ABCDEFGHI on ax0 connected to cms.example.com"


def test_logout_values():
    stats = UserStats(errcode=0, bytes_recv=50, bytes_sent=100)
    text = format_logout("W1AW", stats, 10.0)
    assert text == "Logout W1AW      tx:100 rx:50 10.0s 15.0 Bytes/s (0)"


def test_logout_truncates_usercall_and_reports_code():
    stats = UserStats(errcode=7, bytes_recv=1, bytes_sent=2)
    text = format_logout("ABCDEFGHIJKL", stats, 3.0)
    assert text.split()[1] == "ABCDEFGHIJKL"[:9]
    assert text.endswith("(7)")


def test_logout_zero_elapsed():
    stats = UserStats(bytes_recv=5, bytes_sent=5)
    text = format_logout("W1AW", stats, 0.0)
    assert "inf Bytes/s" in text