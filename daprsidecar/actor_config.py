"""Configuration of the actor runtime."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta

from .durations import parse_duration

DEFAULT_ACTOR_IDLE_TIMEOUT = timedelta(minutes=60)
DEFAULT_HEARTBEAT_INTERVAL = timedelta(seconds=1)
DEFAULT_ACTOR_SCAN_INTERVAL = timedelta(seconds=30)
DEFAULT_ONGOING_CALL_TIMEOUT = timedelta(seconds=60)


@dataclass
class ActorConfig:
    """Settings that govern actor placement, activation and draining."""

    host_address: str = ""
    dapr_id: str = ""
    placement_service_address: str = ""
    hosted_actor_types: list[str] = field(default_factory=list)
    port: int = 0
    heartbeat_interval: timedelta = DEFAULT_HEARTBEAT_INTERVAL
    actor_deactivation_scan_interval: timedelta = DEFAULT_ACTOR_SCAN_INTERVAL
    actor_idle_timeout: timedelta = DEFAULT_ACTOR_IDLE_TIMEOUT
    drain_ongoing_call_timeout: timedelta = DEFAULT_ONGOING_CALL_TIMEOUT
    drain_rebalanced_actors: bool = False


def _duration_or(text: str, default: timedelta) -> timedelta:
    try:
        return parse_duration(text)
    except ValueError:
        return default


def new_config(
    host_address: str,
    dapr_id: str,
    placement_address: str,
    hosted_actors: Iterable[str] | None,
    port: int,
    actor_scan_interval: str,
    actor_idle_timeout: str,
    ongoing_call_timeout: str,
    drain_rebalanced_actors: bool,
) -> ActorConfig:
    """Build an actor configuration; unparsable durations fall back to defaults."""
    return ActorConfig(
        host_address=host_address,
        dapr_id=dapr_id,
        placement_service_address=placement_address,
        hosted_actor_types=list(hosted_actors or []),
        port=port,
        heartbeat_interval=DEFAULT_HEARTBEAT_INTERVAL,
        actor_deactivation_scan_interval=_duration_or(actor_scan_interval, DEFAULT_ACTOR_SCAN_INTERVAL),
        actor_idle_timeout=_duration_or(actor_idle_timeout, DEFAULT_ACTOR_IDLE_TIMEOUT),
        drain_ongoing_call_timeout=_duration_or(ongoing_call_timeout, DEFAULT_ONGOING_CALL_TIMEOUT),
        drain_rebalanced_actors=drain_rebalanced_actors,
    )