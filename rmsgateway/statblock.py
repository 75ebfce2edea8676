"""Gateway and auto check-in status block with its slot tables."""

from __future__ import annotations

import enum
import logging
import os
import time
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

SHM_DEBUG_FILE = "/etc/rmsgw/shm_debug"


class AciState(enum.IntEnum):
    """States of the auto check-in process."""

    UNUSED = 0
    RUNNING = 1
    IDLE = 2
    CONNECTING = 3
    CONNECTED = 4
    ADD_CHANNEL = 5
    CHANNEL_UPDATE = 6
    VERSION_UPDATE = 7
    DISCONNECTING = 8
    DISCONNECTED = 9


class GwState(enum.IntEnum):
    """States of a gateway process."""

    UNUSED = 0
    RUNNING = 1
    IDLE = 2
    CONNECTING = 3
    AUTHORIZING = 4
    CONNECTED = 5
    LOGIN = 6
    LOGGED_IN = 7
    COMM_WAIT = 8
    SENDING = 9
    RECEIVING = 10
    DISCONNECTING = 11
    DISCONNECTED = 12


_ACI_STATE_TEXT = {
    AciState.UNUSED: "Unused",
    AciState.RUNNING: "Running",
    AciState.IDLE: "Idle",
    AciState.CONNECTING: "Connecting",
    AciState.CONNECTED: "Connected",
    AciState.ADD_CHANNEL: "Add Channel",
    AciState.CHANNEL_UPDATE: "Update Channel",
    AciState.VERSION_UPDATE: "Update Version",
    AciState.DISCONNECTING: "Disconnecting",
    AciState.DISCONNECTED: "Disconnected",
}

_GW_STATE_TEXT = {
    GwState.UNUSED: "Unused",
    GwState.RUNNING: "Running",
    GwState.IDLE: "Idle",
    GwState.CONNECTING: "Connecting",
    GwState.AUTHORIZING: "Authorizing",
    GwState.CONNECTED: "Connected",
    GwState.LOGIN: "Login",
    GwState.LOGGED_IN: "Logged In",
    GwState.COMM_WAIT: "Comm Wait",
    GwState.SENDING: "Sending",
    GwState.RECEIVING: "Receiving",
    GwState.DISCONNECTING: "Disconnecting",
    GwState.DISCONNECTED: "Disconnected",
}

_GW_COMM_SYMBOL = {
    GwState.UNUSED: "  ",
    GwState.RUNNING: "~~",
    GwState.IDLE: "..",
    GwState.CONNECTING: "==",
    GwState.AUTHORIZING: "++",
    GwState.CONNECTED: "--",
    GwState.LOGIN: "^^",
    GwState.LOGGED_IN: "--",
    GwState.COMM_WAIT: "><",
    GwState.SENDING: "->",
    GwState.RECEIVING: "<-",
    GwState.DISCONNECTING: "vv",
    GwState.DISCONNECTED: "##",
}


def shm_debug_enabled(path: str | os.PathLike[str] = SHM_DEBUG_FILE) -> bool:
    """Return True when the status block debugging flag file exists."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def map_aci_state(state: int) -> str:
    """Return the descriptive text for an ACI state.

    Raises ValueError for a value that is not an ACI state.
    """
    return _ACI_STATE_TEXT[AciState(state)]


def map_gw_state(state: int) -> str:
    """Return the descriptive text for a gateway state.

    Raises ValueError for a value that is not a gateway state.
    """
    return _GW_STATE_TEXT[GwState(state)]


def map_gw_comm(state: int) -> str:
    """Return the two-character communication symbol for a gateway state.

    Raises ValueError for a value that is not a gateway state.
    """
    return _GW_COMM_SYMBOL[GwState(state)]


@dataclass
class AciHost:
    """Check-in counters for one CMS host."""

    host: str = ""
    last_ci: int = 0
    last_failure: int = 0
    ci_count: int = 0
    tot_fail_count: int = 0
    cur_fail_count: int = 0
    cur_channel_updates: int = 0
    cur_channel_errors: int = 0


@dataclass
class GatewayEntry:
    """Status and counters for one gateway callsign."""

    gwcall: str = ""
    pid: int = -1
    state: GwState = GwState.UNUSED
    client: str = ""
    cms: str = ""
    connects: int = 0
    bytes_in: int = 0
    bytes_out: int = 0


def _slot_matches(key: str, stored: str, limit: int) -> bool:
    n = min(limit, len(key))
    return stored[:n] == key[:n]


@dataclass(init=False)
class StatusBlock:
    """Status of the auto check-in process and of the gateway processes."""

    aci_pid: int
    aci_state: AciState
    aci_hostidx: int
    hosts: list[AciHost]
    gateways: list[GatewayEntry]
    max_hostname: int
    max_gwcall: int
    max_usercall: int
    debug: bool = field(default=False)

    def __init__(
        self,
        cms_table_size: int = 10,
        gw_table_size: int = 32,
        max_hostname: int = 64,
        max_gwcall: int = 10,
        max_usercall: int = 10,
    ) -> None:
        self.aci_pid = -1
        self.aci_state = AciState.UNUSED
        self.aci_hostidx = -1
        self.hosts = [AciHost() for _ in range(cms_table_size)]
        self.gateways = [GatewayEntry() for _ in range(gw_table_size)]
        self.max_hostname = max_hostname
        self.max_gwcall = max_gwcall
        self.max_usercall = max_usercall
        self.debug = False

    def _debug(self, msg: str, *args: object) -> None:
        if self.debug:
            log.debug("SHMDEBUG: " + msg, *args)

    # ACI side

    def get_cms_slot(self, cms_host: str) -> int | None:
        """Find or assign the host table slot for ``cms_host``.

        Returns the slot index, or None when the table is full and the
        host is not in it.
        """
        self._debug("get_cms_slot(cms_host=%s)", cms_host)
        for index, entry in enumerate(self.hosts):
            if not entry.host:
                entry.host = cms_host[: self.max_hostname]
                self._debug("get_cms_slot(): new slot %d", index)
                break
            if _slot_matches(cms_host, entry.host, self.max_hostname):
                self._debug("get_cms_slot(): matched %d", index)
                break
        else:
            log.warning(
                "ACI host status table FULL - %s counters not stored", cms_host
            )
            return None
        self.aci_hostidx = index
        return index

    def set_aci_state(self, state: AciState) -> None:
        """Set the state of the auto check-in process."""
        state = AciState(state)
        self._debug("sbset_aci_state: %s", map_aci_state(state))
        self.aci_state = state

    def set_aci_pid(self, pid: int | None = None) -> None:
        """Record the auto check-in process id (the current process by default)."""
        self._debug("sbset_aci_pid()")
        self.aci_pid = os.getpid() if pid is None else pid

    def incr_aci_error(self, cms_host: str, now: int | None = None) -> None:
        """Count a failed check-in with ``cms_host``."""
        self._debug("sb_incr_aci_error(cms_host=%s)", cms_host)
        index = self.get_cms_slot(cms_host)
        if index is None:
            return
        entry = self.hosts[index]
        entry.last_failure = int(time.time()) if now is None else now
        entry.tot_fail_count += 1
        entry.cur_fail_count += 1

    def incr_aci_checkin(self, cms_host: str, now: int | None = None) -> None:
        """Count a successful check-in and clear the current failure count."""
        self._debug("sb_incr_aci_checkin(cms_host=%s)", cms_host)
        index = self.get_cms_slot(cms_host)
        if index is None:
            return
        entry = self.hosts[index]
        entry.last_ci = int(time.time()) if now is None else now
        entry.ci_count += 1
        entry.cur_fail_count = 0

    def set_channel_stats(self, cms_host: str, updates: int, errors: int) -> None:
        """Record channels updated and in error on the last check-in."""
        self._debug(
            "sbset_channel_stats(cms_host=%s, updates=%d, errors=%d)",
            cms_host,
            updates,
            errors,
        )
        index = self.get_cms_slot(cms_host)
        if index is None:
            return
        entry = self.hosts[index]
        entry.cur_channel_updates = updates
        entry.cur_channel_errors = errors

    # gateway side

    def get_gw_slot(self, gwcall: str) -> int | None:
        """Find or assign the gateway table slot for ``gwcall``.

        Returns the slot index, or None when the table is full and the
        callsign is not in it.
        """
        self._debug("get_gw_slot(gwcall=%s)", gwcall)
        for index, entry in enumerate(self.gateways):
            if not entry.gwcall:
                entry.gwcall = gwcall[: self.max_gwcall]
                self._debug("get_gw_slot(): new slot %d", index)
                break
            if _slot_matches(gwcall, entry.gwcall, self.max_gwcall):
                self._debug("get_gw_slot(): matched %d", index)
                break
        else:
            log.warning(
                "gateway status table FULL - stats for %s not stored", gwcall
            )
            return None
        return index

    def _gateway(self, gwcall: str) -> GatewayEntry | None:
        index = self.get_gw_slot(gwcall)
        return None if index is None else self.gateways[index]

    def set_gw_state(self, gwcall: str, state: GwState) -> None:
        """Set the state of the gateway ``gwcall``."""
        state = GwState(state)
        self._debug("sbset_gw_state(gwcall=%s): %s", gwcall, map_gw_state(state))
        entry = self._gateway(gwcall)
        if entry is not None:
            entry.state = state

    def set_gw_pid(self, gwcall: str, pid: int | None = None) -> None:
        """Record the gateway process id (the current process by default)."""
        self._debug("sbset_gw_pid(gwcall=%s)", gwcall)
        entry = self._gateway(gwcall)
        if entry is not None:
            entry.pid = os.getpid() if pid is None else pid

    def set_gw_usercall(self, gwcall: str, usercall: str | None) -> None:
        """Record the callsign of the station connected to the gateway."""
        self._debug("sbset_gw_usercall(gwcall=%s, usercall=%s)", gwcall, usercall)
        entry = self._gateway(gwcall)
        if entry is not None and usercall is not None:
            entry.client = usercall[: self.max_usercall]

    def set_gw_cms(self, gwcall: str, cms_host: str | None) -> None:
        """Record the CMS host the gateway is using."""
        entry = self._gateway(gwcall)
        if entry is not None and cms_host is not None:
            entry.cms = cms_host[: self.max_hostname]

    def incr_gw_connects(self, gwcall: str) -> None:
        """Count one more connection to the gateway."""
        self._debug("sb_incr_gw_connects(gwcall=%s)", gwcall)
        entry = self._gateway(gwcall)
        if entry is not None:
            entry.connects += 1

    def add_gw_bytes_in(self, gwcall: str, count: int) -> None:
        """Add ``count`` to the bytes received by the gateway."""
        self._debug("sb_add_gw_bytes_in(gwcall=%s, count=%d)", gwcall, count)
        entry = self._gateway(gwcall)
        if entry is not None:
            entry.bytes_in += count

    def add_gw_bytes_out(self, gwcall: str, count: int) -> None:
        """Add ``count`` to the bytes sent by the gateway."""
        self._debug("sb_add_gw_bytes_out(gwcall=%s, count=%d)", gwcall, count)
        entry = self._gateway(gwcall)
        if entry is not None:
            entry.bytes_out += count