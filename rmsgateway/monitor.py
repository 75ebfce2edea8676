"""Text views of the gateway status block: a plain dump and status tables."""

from __future__ import annotations

import time

from .statblock import AciState, GwState, StatusBlock, map_aci_state, map_gw_comm, map_gw_state

DEFAULT_INTERVAL = 5

_TAG_TITLE = "title"
_TAG_HEADING = "heading"
_TAG_ACI_IDLE = "idle"
_TAG_ACI_ACTIVE = "active"
_TAG_LAST_CMS = "last_cms"
_TAG_ERROR = "error"

StatusLine = tuple[str, "str | None"]


def format_timestamp(ts: int) -> str:
    """Format a check-in time as local ``YYYYMMDD-HHMMSS``.

    Times at or before the epoch give ``[never]``; times that cannot be
    converted give ``[time error]``.
    """
    if ts <= 0:
        return "[never]"
    try:
        t = time.localtime(ts)
    except (OverflowError, OSError, ValueError):
        return "[time error]"
    text = "%4d%02d%02d-%02d%02d%02d" % (
        t.tm_year,
        t.tm_mon,
        t.tm_mday,
        t.tm_hour,
        t.tm_min,
        t.tm_sec,
    )
    return text[:15]


def dump_status(block: StatusBlock) -> str:
    """Return a field-by-field dump of the status block."""
    lines = [
        "*** Linux RMS Gateway Shared Memory Dump***",
        "-------------------------------------------",
        "aci.aci_pid: %d" % block.aci_pid,
        "aci.aci_state: %d" % int(block.aci_state),
        "aci.aci_hostidx: %d" % block.aci_hostidx,
    ]
    for i, host in enumerate(block.hosts):
        prefix = "aci.aci_host[%d]" % i
        lines += [
            '%s.aci_host: "%s"' % (prefix, host.host[: block.max_hostname]),
            "%s.aci_host_last_ci: %d" % (prefix, host.last_ci),
            "%s.aci_host_last_failure: %d" % (prefix, host.last_failure),
            "%s.aci_host_tot_fail_count: %d" % (prefix, host.tot_fail_count),
            "%s.aci_host_cur_fail_count: %d" % (prefix, host.cur_fail_count),
            "%s.aci_host_cur_channel_updates: %d" % (prefix, host.cur_channel_updates),
            "%s.aci_host_cur_channel_errors: %d" % (prefix, host.cur_channel_errors),
        ]
    for i, gw in enumerate(block.gateways):
        prefix = "rmsgw[%d]" % i
        lines += [
            "%s.gw_pid: %d" % (prefix, gw.pid),
            "%s.gw_state: %d" % (prefix, int(gw.state)),
            '%s.gw_call: "%s"' % (prefix, gw.gwcall[: block.max_gwcall + 1]),
            '%s.gw_client: "%s"' % (prefix, gw.client[: block.max_usercall + 1]),
            '%s.gw_cms: "%s"' % (prefix, gw.cms[: block.max_hostname]),
            "%s.gw_connects: %d" % (prefix, gw.connects),
            "%s.gw_bytes_in: %d" % (prefix, gw.bytes_in),
            "%s.gw_bytes_out: %d" % (prefix, gw.bytes_out),
        ]
    return "\n".join(lines) + "\n"


def _aci_row_tag(block: StatusBlock, index: int) -> str | None:
    if block.aci_state != AciState.IDLE:
        return _TAG_ACI_ACTIVE if block.aci_hostidx == index else None
    if block.aci_hostidx == index:
        return _TAG_LAST_CMS
    if block.hosts[index].cur_fail_count > 0:
        return _TAG_ERROR
    return None


def aci_status_lines(block: StatusBlock) -> list[StatusLine]:
    """Return the ACI status table as ``(text, highlight)`` lines.

    The highlight is None for plain text or one of ``idle``, ``active``,
    ``heading``, ``last_cms`` and ``error``.
    """
    state_text = map_aci_state(block.aci_state)
    if block.aci_state == AciState.IDLE:
        title = ("ACI %s (%d)" % (state_text, block.aci_hostidx), _TAG_ACI_IDLE)
    else:
        title = (
            "ACI %s (%d) (%6d)" % (state_text, block.aci_hostidx, block.aci_pid),
            _TAG_ACI_ACTIVE,
        )
    heading = (
        " #  %-12.12s %-15.15s %-15.15s %8.8s %8.8s %8.8s"
        % ("ACI Host", "Last CI", "Lst Fail", "CIs", "Ttl Fail", "Cur Fail"),
        _TAG_HEADING,
    )
    lines: list[StatusLine] = [title, heading]
    for i, host in enumerate(block.hosts):
        if not host.host:
            break
        text = "%2d: %-12.12s %-15.15s %-15.15s %8d %8d " % (
            i + 1,
            host.host,
            format_timestamp(host.last_ci),
            format_timestamp(host.last_failure),
            host.ci_count,
            host.tot_fail_count,
        )
        text += "%8d" % host.cur_fail_count
        lines.append((text, _aci_row_tag(block, i)))
    return lines


def gw_status_lines(block: StatusBlock) -> list[StatusLine]:
    """Return the gateway status table as ``(text, highlight)`` lines.

    Unused slots are left out.  For idle gateways the process id, the
    communication symbol and the client are blanked.
    """
    lines: list[StatusLine] = [
        ("Gateway", _TAG_TITLE),
        (
            " #  %6.6s %12.12s %12.12s %12.12s %12.12s %9.9s  %-9.9s"
            % ("PID", "State", "Connects", "Bytes In", "Bytes Out", "GW Call", "Client"),
            _TAG_HEADING,
        ),
    ]
    for i, gw in enumerate(block.gateways):
        if gw.state == GwState.UNUSED:
            continue
        idle = gw.state == GwState.IDLE
        pid_text = "%6d " % gw.pid
        comm_text = "%2s%-9.9s" % (map_gw_comm(gw.state), gw.client)
        if idle:
            pid_text = " " * len(pid_text)
            comm_text = " " * len(comm_text)
        text = (
            "%2d: " % (i + 1)
            + pid_text
            + "%12s %12d %12d %12d %9.9s"
            % (map_gw_state(gw.state), gw.connects, gw.bytes_in, gw.bytes_out, gw.gwcall)
            + comm_text
        )
        lines.append((text, None))
    return lines


def interval_for_key(key: str | int) -> int | None:
    """Return the refresh interval chosen by a digit key.

    ``0`` means ten seconds; any other key gives None.
    """
    if isinstance(key, int):
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    if len(key) != 1 or key not in "0123456789":
        return None
    return 10 if key == "0" else int(key)