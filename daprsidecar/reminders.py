"""Keys, timestamps and scheduling rules for actor reminders."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from .actor_types import CreateReminderRequest, Reminder, ReminderTrack
from .durations import parse_duration

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})\Z"
)


def combined_actor_key(actor_type: str, actor_id: str) -> str:
    """Return the key identifying one actor instance."""
    return f"{actor_type}-{actor_id}"


def reminder_key(actor_type: str, actor_id: str, name: str) -> str:
    """Return the key identifying one reminder of one actor."""
    return f"{combined_actor_key(actor_type, actor_id)}-{name}"


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` in UTC as an RFC 3339 timestamp with whole seconds.

    Naive datetimes are taken to be in UTC already.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime; raises ``ValueError``."""
    match = _RFC3339.match(text)
    if match is None:
        raise ValueError(f'cannot parse "{text}" as RFC 3339 time')
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction, zone = match.group(7), match.group(8)
    micros = int((fraction + "000000")[:6]) if fraction else 0
    if zone == "Z":
        tz = timezone.utc
    else:
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        if hours > 23 or minutes > 59:
            raise ValueError(f'time zone offset out of range in "{text}"')
        offset = timedelta(hours=hours, minutes=minutes)
        tz = timezone(-offset if zone[0] == "-" else offset)
    try:
        return datetime(year, month, day, hour, minute, second, micros, tzinfo=tz)
    except ValueError as error:
        raise ValueError(f'cannot parse "{text}" as RFC 3339 time: {error}') from error


def next_invoke_time(reminder: Reminder, track: ReminderTrack | None) -> datetime:
    """Return when ``reminder`` should fire next, given when it last fired.

    Raises ``ValueError`` if any of the reminder's times or durations cannot be parsed.
    """
    try:
        registered = parse_timestamp(reminder.registered_time)
    except ValueError as error:
        raise ValueError(f"error parsing reminder registered time: {error}") from error

    try:
        due = parse_duration(reminder.due_time)
    except ValueError as error:
        raise ValueError(f"error parsing reminder due time: {error}") from error

    last_fired: datetime | None = None
    if track is not None and track.last_fired_time:
        try:
            last_fired = parse_timestamp(track.last_fired_time)
        except ValueError as error:
            raise ValueError(f"error parsing reminder last fired time: {error}") from error
        if last_fired == _ZERO_TIME:
            last_fired = None

    if reminder.period:
        try:
            period = parse_duration(reminder.period)
        except ValueError as error:
            raise ValueError(f"error parsing reminder period: {error}") from error
        return last_fired + period if last_fired is not None else registered + due

    return last_fired + due if last_fired is not None else registered + due


def reminder_requires_update(request: CreateReminderRequest, reminder: Reminder) -> bool:
    """Whether ``request`` names ``reminder`` but changes its data, due time or period."""
    same_reminder = (
        reminder.actor_id == request.actor_id
        and reminder.actor_type == request.actor_type
        and reminder.name == request.name
    )
    changed = (
        reminder.data != request.data
        or reminder.due_time != request.due_time
        or reminder.period != request.period
    )
    return same_reminder and changed