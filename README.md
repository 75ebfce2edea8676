# rmsgateway

Building blocks for an amateur radio RMS gateway that relays connections
between AX.25 radio clients and a Winlink CMS host. The package has no
dependencies beyond the standard library.

## Modules

- **`rmsgateway.strutil`**: small string helpers. `strcvt` replaces one
  character with another, `strtrim` trims a set of characters from the front
  (`trim < 0`), both ends (`trim == 0`) or the back (`trim > 0`), and `upcase`
  upper-cases ASCII letters. `strcvt` and `upcase` pass `None` through.
- **`rmsgateway.symbols`**: `SymbolTable`, a table of named string values.
  `add` puts a new symbol at the front and raises `ValueError` for an empty
  name. `assign` adds or replaces a symbol after trimming blanks. `assign_text`
  splits `name=value` at the last `=`. `substitute` replaces `$NAME` references,
  with a backslash making the next character literal and undefined names
  replaced by nothing. The table supports `len()` and iteration over
  `(name, value)` pairs, newest first.
- **`rmsgateway.syslogmap`**: `map_priority` and `map_facility` turn syslog
  names such as `"debug"` or `"local0"` into their numeric values. Unknown
  names give `LOG_INFO` and `LOG_LOCAL0`.
- **`rmsgateway.statfile`**: `set_stat_file` creates a file if needed (mode
  0644) and sets its access and modification times to now, for use as a
  timestamp. It raises `OSError` on failure.
- **`rmsgateway.statblock`**: `StatusBlock` holds the state of the auto
  check-in (ACI) process with a table of per-CMS-host counters (`AciHost`),
  and a fixed-size table of gateway entries (`GatewayEntry`) with state,
  process id, client call, CMS host, connect count and byte counters.
  `AciState` and `GwState` name the states; `map_aci_state`, `map_gw_state`
  and `map_gw_comm` give their display text and two-character symbols.
  `shm_debug_enabled` reports whether a debugging flag file exists.
- **`rmsgateway.monitor`**: text views of a `StatusBlock`. `dump_status`
  returns a field-by-field dump; `aci_status_lines` and `gw_status_lines`
  return tables as `(text, highlight)` pairs; `format_timestamp` formats a
  time as local `YYYYMMDD-HHMMSS` (or `[never]`); `interval_for_key` maps the
  digit keys to refresh intervals, with `0` meaning ten seconds.
- **`rmsgateway.handshake`**: `ConversationSense` follows the FF/FQ
  end-of-conversation handshake between CMS and client using `Sense` flags
  and builds the notice sent when the CMS closes. `is_keepalive` recognises
  the CMS keep-alive packet; `retry_delay` gives the back-off for a stalled
  radio write and raises `TimeoutError` after too many retries.
- **`rmsgateway.messages`**: `format_greeting`, `read_banner` (the banner file
  split into pieces of bounded length), `format_logon`, `format_logout`, and
  `UserStats` for a session's result code and byte counts.
- **`rmsgateway.scripts`**: `python_command` and `run_python_script` run an
  updater script through the shell with `-d`; `send_version` and
  `send_channel` run the version and channel updaters; `channel_available`
  runs a channel status checker; `needs_update` decides when a channel's
  status must be sent again; `ChannelStats` gathers the counts for the
  check-in summary line.

## Examples

```python
from rmsgateway.strutil import strtrim, upcase
from rmsgateway.symbols import SymbolTable
from rmsgateway.syslogmap import map_priority

strtrim("  hello  ", " \t", 0)    # "hello"
strtrim("  hello  ", " \t", -1)   # "hello  "
upcase("w1aw-5")                  # "W1AW-5"

table = SymbolTable()
table.assign_text("CALL = W1AW")
table.substitute("gateway $CALL ready")   # "gateway W1AW ready"

map_priority("debug")   # 7
```

Tracking gateway activity in a status block:

```python
from rmsgateway.statblock import StatusBlock
from rmsgateway.monitor import gw_status_lines

block = StatusBlock(5, 10, 64, 10, 10)
block.set_gw_pid("W1AW-10", 4242)
block.incr_gw_connects("W1AW-10")
block.add_gw_bytes_in("W1AW-10", 512)
block.add_gw_bytes_out("W1AW-10", 2048)

for text, highlight in gw_status_lines(block):
    print(text)
```

When a table is full, `get_cms_slot` and `get_gw_slot` return `None` and the
counters for that host or gateway are left unchanged.

## What the package does not do

It provides no commands. It does not open connections to a CMS, relay
traffic between the radio and the network, or log in to a CMS; it does not
load gateway configuration, version or channel files; it keeps the status
block in process memory only, not in memory shared between processes; and
the monitor builds text lines but does not draw an interactive terminal
screen.

## Tests

The test suite uses pytest; install the `test` extra to get it.