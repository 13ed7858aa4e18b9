# daprsidecar

Building blocks for the actor side of an application sidecar: duration
parsing, actor runtime configuration, the request and record types used for
actor calls, state, reminders and timers, the rules for reminder keys and
scheduling, and a state store interface with an in-memory implementation.

The package has no dependencies outside the standard library.

## Installation

```
pip install daprsidecar
```

To run the test suite:

```
pip install "daprsidecar[test]"
pytest
```

## Modules

### `daprsidecar.durations`

- `parse_duration(text)` turns strings such as `"1h30m"`, `"250ms"`, `"1.5s"`
  or `"-2m"` into a `datetime.timedelta`. The units are `ns`, `us` (or `µs`),
  `ms`, `s`, `m` and `h`. A bare `"0"` is accepted. Precision below one
  microsecond is dropped. Malformed input, a missing or unknown unit and
  overflow all raise `ValueError`.
- `format_duration(delta)` writes a `timedelta` back in the same form, for
  example `"1h0m0s"`, `"1m30s"`, `"250ms"` or `"0s"`.

### `daprsidecar.actor_config`

- `ActorConfig` is a dataclass with the host address, app id, placement
  service address, hosted actor types, port, heartbeat interval, deactivation
  scan interval, idle timeout, drain timeout for ongoing calls and the
  `drain_rebalanced_actors` flag.
- `new_config(host_address, dapr_id, placement_address, hosted_actors, port,
  actor_scan_interval, actor_idle_timeout, ongoing_call_timeout,
  drain_rebalanced_actors)` builds one from duration strings. A string that
  does not parse falls back to the default: 30 seconds scan interval, one hour
  idle timeout, 60 seconds drain timeout. The heartbeat interval is always one
  second.

### `daprsidecar.actor_types`

Dataclasses for actor requests and responses: `ActorHostedRequest`,
`CallRequest`, `CallResponse`, `CreateReminderRequest`, `CreateTimerRequest`,
`DeleteReminderRequest`, `DeleteTimerRequest`, `GetReminderRequest`,
`GetStateRequest`, `DeleteStateRequest`, `SaveStateRequest`, `StateResponse`,
`TransactionalRequest` and `TransactionalOperation`, and the enum
`OperationType` (`UPSERT`, `DELETE`).

Types with a JSON form:

- `Reminder.to_dict()` / `Reminder.from_dict(data)` use the keys `actorID`,
  `actorType`, `name`, `data`, `period`, `dueTime` and `registeredTime`; empty
  `actorID`, `actorType`, `name` and `registeredTime` are left out.
- `ReminderTrack.to_dict()` / `ReminderTrack.from_dict(data)` use
  `lastFiredTime`.
- `ReminderResponse.to_dict()` and `TimerResponse.to_dict()` give the payloads
  that an actor receives when a reminder or a timer fires.
- `TransactionalUpsert.from_value(value)` and
  `TransactionalDelete.from_value(value)` decode an operation's request from a
  mapping or a dataclass. Keys are matched without regard to case. Anything
  else raises `TypeError`.

### `daprsidecar.state_store`

- `StateStore` (`get`, `set`, `delete`) and `TransactionalStore` (adds
  `multi`) are abstract interfaces.
- `SetRequest`, `DeleteRequest`, `TransactionalStateRequest` and the enum
  `StateOperation` describe operations.
- `MemoryStateStore` is a thread-safe implementation held in memory. Values are
  stored as compact JSON bytes, with `<`, `>` and `&` escaped. Objects that have
  a `to_dict()` method, or are dataclasses, are encoded through that form. Raw
  bytes cannot be stored and raise `TypeError`. `get` returns `None` for a
  missing key. `multi` validates and encodes every operation before it applies
  any, so a bad operation leaves the store unchanged. The store supports `len()`
  and `in`.

### `daprsidecar.reminders`

- `combined_actor_key(actor_type, actor_id)` returns `"<type>-<id>"`.
- `reminder_key(actor_type, actor_id, name)` returns `"<type>-<id>-<name>"`.
- `format_timestamp(moment)` writes an RFC 3339 UTC timestamp with whole
  seconds. Naive datetimes are taken to be UTC.
- `parse_timestamp(text)` reads an RFC 3339 timestamp into an aware
  `datetime`, and raises `ValueError` on bad input.
- `next_invoke_time(reminder, track)` gives the next fire time.
  - If the reminder has never fired, this is the registered time plus the due
    time.
  - Otherwise it is the last fire time plus the period.
  - If there is no period, it is the last fire time plus the due time.
  - Unparsable times or durations raise `ValueError`.
- `reminder_requires_update(request, reminder)` is true when the request names
  the same actor and reminder but changes its data, due time or period.

## Example

```python
from datetime import timedelta

from daprsidecar.actor_config import new_config
from daprsidecar.actor_types import Reminder, ReminderTrack
from daprsidecar.durations import format_duration, parse_duration
from daprsidecar.reminders import next_invoke_time, reminder_key
from daprsidecar.state_store import MemoryStateStore, SetRequest

assert parse_duration("1h30m") == timedelta(hours=1, minutes=30)
assert format_duration(timedelta(milliseconds=250)) == "250ms"

config = new_config("", "myapp", "", ["cat"], 50001, "bogus", "1h", "60s", False)
assert config.actor_deactivation_scan_interval == timedelta(seconds=30)

store = MemoryStateStore()
reminder = Reminder(
    actor_id="hobbit", actor_type="cat", name="feed",
    due_time="1s", period="10s", registered_time="2020-01-01T00:00:00Z",
)
store.set(SetRequest(key="actors-cat", value=[reminder]))

track = ReminderTrack(last_fired_time="2020-01-01T00:00:01Z")
print(reminder_key("cat", "hobbit", "feed"))   # cat-hobbit-feed
print(next_invoke_time(reminder, track))       # 2020-01-01 00:00:11+00:00
```

## What this package does not do

This package holds models, rules and storage only. It does not contain any of
the following:

- An actor runtime that activates, calls, deactivates or rebalances actors.
- Anything that fires reminders or runs timers on a schedule.
- A channel that calls into application code over HTTP or any other transport.
- A placement service client.
- Models of component or configuration resources.
- A server or command-line program.

`MemoryStateStore` keeps nothing on disk. Its contents are lost when the
process exits.