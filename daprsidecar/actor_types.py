"""Request, response and persisted record types of the actor runtime."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class OperationType(str, Enum):
    """A state operation taking part in a transaction."""

    UPSERT = "upsert"
    DELETE = "delete"

    def __str__(self) -> str:
        return self.value


@dataclass
class ActorHostedRequest:
    """Asks whether an actor is active on this host."""

    actor_id: str = ""
    actor_type: str = ""


@dataclass
class CallRequest:
    """A call to a method of an actor."""

    actor_type: str = ""
    actor_id: str = ""
    method: str = ""
    data: bytes = b""
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class CallResponse:
    """The result of an actor call."""

    data: bytes = b""
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class CreateReminderRequest:
    """Creates or replaces a persistent reminder."""

    name: str = ""
    actor_type: str = ""
    actor_id: str = ""
    data: Any = None
    due_time: str = ""
    period: str = ""


@dataclass
class CreateTimerRequest:
    """Creates or replaces an in-memory timer for an active actor."""

    name: str = ""
    actor_type: str = ""
    actor_id: str = ""
    due_time: str = ""
    period: str = ""
    callback: str = ""
    data: Any = None


@dataclass
class DeleteReminderRequest:
    """Deletes a reminder."""

    name: str = ""
    actor_type: str = ""
    actor_id: str = ""


@dataclass
class DeleteTimerRequest:
    """Deletes a timer."""

    name: str = ""
    actor_type: str = ""
    actor_id: str = ""


@dataclass
class GetReminderRequest:
    """Looks up a reminder."""

    name: str = ""
    actor_type: str = ""
    actor_id: str = ""


@dataclass
class GetStateRequest:
    """Reads one key of an actor's state."""

    actor_id: str = ""
    actor_type: str = ""
    key: str = ""


@dataclass
class DeleteStateRequest:
    """Removes one key of an actor's state."""

    actor_id: str = ""
    actor_type: str = ""
    key: str = ""


@dataclass
class SaveStateRequest:
    """Writes one key of an actor's state."""

    actor_id: str = ""
    actor_type: str = ""
    key: str = ""
    value: Any = None


@dataclass
class StateResponse:
    """The stored bytes of an actor state key, or ``None`` if absent."""

    data: bytes | None = None


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be an object, not {type(data).__name__}")
    return data


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


@dataclass
class Reminder:
    """A reminder as persisted in the state store."""

    actor_id: str = ""
    actor_type: str = ""
    name: str = ""
    data: Any = None
    period: str = ""
    due_time: str = ""
    registered_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted JSON form; empty identity fields are omitted."""
        result: dict[str, Any] = {}
        if self.actor_id:
            result["actorID"] = self.actor_id
        if self.actor_type:
            result["actorType"] = self.actor_type
        if self.name:
            result["name"] = self.name
        result["data"] = self.data
        result["period"] = self.period
        result["dueTime"] = self.due_time
        if self.registered_time:
            result["registeredTime"] = self.registered_time
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Reminder:
        """Build a reminder from its decoded JSON form."""
        data = _as_mapping(data, "reminder")
        return cls(
            actor_id=_string(data, "actorID"),
            actor_type=_string(data, "actorType"),
            name=_string(data, "name"),
            data=data.get("data"),
            period=_string(data, "period"),
            due_time=_string(data, "dueTime"),
            registered_time=_string(data, "registeredTime"),
        )


@dataclass
class ReminderResponse:
    """The payload delivered to an actor when a reminder fires."""

    data: Any = None
    due_time: str = ""
    period: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form sent to the application."""
        return {"data": self.data, "dueTime": self.due_time, "period": self.period}


@dataclass
class ReminderTrack:
    """Records when a reminder last fired."""

    last_fired_time: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted JSON form."""
        return {"lastFiredTime": self.last_fired_time}

    @classmethod
    def from_dict(cls, data: Any) -> ReminderTrack:
        """Build a track from its decoded JSON form."""
        return cls(last_fired_time=_string(_as_mapping(data, "reminder track"), "lastFiredTime"))


@dataclass
class TimerResponse:
    """The payload delivered to an actor when a timer fires."""

    callback: str = ""
    data: Any = None
    due_time: str = ""
    period: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form sent to the application."""
        return {
            "callback": self.callback,
            "data": self.data,
            "dueTime": self.due_time,
            "period": self.period,
        }


@dataclass
class TransactionalOperation:
    """One operation of a transaction; ``request`` is decoded per operation type."""

    operation: Union[OperationType, str] = OperationType.UPSERT
    request: Any = None


@dataclass
class TransactionalRequest:
    """A set of state operations on one actor, applied atomically."""

    operations: list[TransactionalOperation] = field(default_factory=list)
    actor_type: str = ""
    actor_id: str = ""


def _decode_fields(value: Any, names: tuple[str, ...]) -> dict[str, Any]:
    """Pick ``names`` out of a mapping or record, matching keys case-insensitively."""
    if value is None:
        return {}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a map, got '{type(value).__name__}'")
    found: dict[str, Any] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeError(f"map key must be a string, not {type(key).__name__}")
        lowered = key.lower()
        if lowered in names:
            found[lowered] = item
    return found


@dataclass
class TransactionalUpsert:
    """Sets ``key`` to ``value``."""

    key: str = ""
    value: Any = None

    @classmethod
    def from_value(cls, value: Any) -> TransactionalUpsert:
        """Decode an upsert from a mapping or record; raises ``TypeError`` otherwise."""
        found = _decode_fields(value, ("key", "value"))
        key = found.get("key", "")
        if not isinstance(key, str):
            raise TypeError("upsert key must be a string")
        return cls(key=key, value=found.get("value"))


@dataclass
class TransactionalDelete:
    """Removes ``key``."""

    key: str = ""

    @classmethod
    def from_value(cls, value: Any) -> TransactionalDelete:
        """Decode a delete from a mapping or record; raises ``TypeError`` otherwise."""
        found = _decode_fields(value, ("key",))
        key = found.get("key", "")
        if not isinstance(key, str):
            raise TypeError("delete key must be a string")
        return cls(key=key)