import pytest

from rmsgateway.handshake import (
    MAX_RETRY_DELAY,
    MAX_WRITE_RETRIES,
    ConversationSense,
    Sense,
    is_keepalive,
    retry_delay,
)


def test_keepalive_detected():
    assert is_keepalive(b";;;;;;\r\n") is True
    assert is_keepalive(b";;;;;;\r\nmore data") is True


def test_non_keepalive():
    assert is_keepalive(b";;;") is False
    assert is_keepalive(b"FF\r") is False


def test_retry_delay_first_is_zero():
    assert retry_delay(0) == 0


def test_retry_delay_capped_and_monotonic():
    delays = [retry_delay(n) for n in range(MAX_WRITE_RETRIES)]
    assert delays == sorted(delays)
    assert max(delays) == MAX_RETRY_DELAY
    assert all(0 <= d <= MAX_RETRY_DELAY for d in delays)


def test_retry_delay_gives_up():
    with pytest.raises(TimeoutError):
        retry_delay(MAX_WRITE_RETRIES)


def test_cms_ff_sets_flag():
    conv = ConversationSense()
    assert conv.cms_data(b"FF\r") is False
    assert conv.sense & Sense.FFUP
    assert not conv.final


def test_client_fq_after_cms_ff_is_final():
    conv = ConversationSense()
    conv.cms_data(b"data FF\r")
    assert conv.client_data(b"FQ\r") is True
    assert conv.final is True
    assert conv.sense & Sense.FQDN


def test_cms_fq_after_client_ff_is_final():
    conv = ConversationSense()
    conv.client_data(b"FF\r")
    assert conv.sense & Sense.FFDN
    assert conv.cms_data(b"FQ\r") is True
    assert conv.sense & Sense.FQUP


def test_other_reply_clears_peer_ff():
    conv = ConversationSense()
    conv.client_data(b"FF\r")
    assert conv.cms_data(b"FC\r") is False
    assert not conv.sense & Sense.FFDN
    assert conv.final is False


def test_fq_without_ff_is_not_final():
    conv = ConversationSense()
    assert conv.client_data(b"FQ\r") is False
    assert conv.sense == Sense.NONE


def test_short_data_changes_nothing():
    conv = ConversationSense()
    conv.cms_data(b"F")
    conv.client_data(b"")
    assert conv.sense == Sense.NONE


def test_closed_message_reports_sense():
    conv = ConversationSense()
    conv.cms_data(b"FF\r")
    msg = conv.closed_message()
    assert msg.startswith("; INFO: Connection closed by CMS (sense = 0x")
    assert msg.endswith(")\r\n")
    assert "0x0001" in msg