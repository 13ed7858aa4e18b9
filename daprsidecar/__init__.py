"""Actor configuration, request types, reminder rules, durations and state storage for an application sidecar."""

__version__ = "0.1.0"

__all__ = [
    "actor_config",
    "actor_types",
    "durations",
    "reminders",
    "state_store",
]