"""Completion handshake tracking between a CMS and an RF client.

When one side is done it sends ``FF``; the other side either answers
with ``FQ`` to end the conversation or turns the line around to send
its own traffic.  The lower nibble of the sense flags holds the uplink
(CMS) bits, the upper nibble the downlink (client) bits.
"""

from __future__ import annotations

import enum

KEEPALIVE = b";;;;;;\r\n"
MAX_WRITE_RETRIES = 15
MAX_RETRY_DELAY = 10
FINAL_ERRCODE = 10


class Sense(enum.IntFlag):
    """Conversation sense flags."""

    NONE = 0x00
    FFUP = 0x01  # uplink (CMS) sent FF
    FQUP = 0x02  # uplink (CMS) sent FQ
    FFDN = 0x10  # downlink (client) sent FF
    FQDN = 0x20  # downlink (client) sent FQ


def is_keepalive(data: bytes) -> bool:
    """Return True when ``data`` is a CMS keep-alive packet."""
    return bytes(data).startswith(KEEPALIVE)


def retry_delay(attempt: int) -> int:
    """Return the seconds to wait before retrying a blocked write.

    ``attempt`` is the number of retries already made.  The delay grows
    with each retry up to ``MAX_RETRY_DELAY`` seconds.  Raises
    TimeoutError once more than ``MAX_WRITE_RETRIES`` retries would be
    needed.
    """
    if attempt + 1 > MAX_WRITE_RETRIES:
        raise TimeoutError(
            "can't send after %d attempts, giving up" % (attempt + 1)
        )
    return max(0, min(attempt, MAX_RETRY_DELAY))


def _sent_ff(data: bytes) -> bool:
    return len(data) >= 3 and data[-3:-1] == b"FF"


def _is_fq(data: bytes) -> bool:
    return data[:2] == b"FQ"


class ConversationSense:
    """Watch the data passing each way and notice the final ``FQ``."""

    def __init__(self) -> None:
        self.sense = Sense.NONE
        self.final = False

    def _observe(self, data: bytes, sent_ff: Sense, sent_fq: Sense, peer_ff: Sense) -> bool:
        data = bytes(data)
        if _sent_ff(data):
            self.sense |= sent_ff
        elif len(data) == 3 and self.sense & peer_ff:
            if _is_fq(data):
                self.sense |= sent_fq
                self.final = True
                return True
            self.sense &= ~peer_ff
        return False

    def cms_data(self, data: bytes) -> bool:
        """Account for a buffer received from the CMS.

        Returns True when the CMS ended the conversation with ``FQ``
        after the client had sent ``FF``.
        """
        return self._observe(data, Sense.FFUP, Sense.FQUP, Sense.FFDN)

    def client_data(self, data: bytes) -> bool:
        """Account for a buffer received from the RF client.

        Returns True when the client ended the conversation with ``FQ``
        after the CMS had sent ``FF``.
        """
        return self._observe(data, Sense.FFDN, Sense.FQDN, Sense.FFUP)

    def closed_message(self) -> str:
        """Return the notice sent to the client when the CMS closes."""
        return "; INFO: Connection closed by CMS (sense = 0x%04x)\r\n" % int(self.sense)