from datetime import timedelta

from daprsidecar.actor_config import (
    DEFAULT_ACTOR_IDLE_TIMEOUT,
    DEFAULT_ACTOR_SCAN_INTERVAL,
    DEFAULT_HEARTBEAT_INTERVAL,
    DEFAULT_ONGOING_CALL_TIMEOUT,
    ActorConfig,
    new_config,
)


def test_defaults_when_durations_empty():
    config = new_config("", "fakeDaprID", "", None, 0, "", "", "", False)
    assert config.dapr_id == "fakeDaprID"
    assert config.hosted_actor_types == []
    assert config.actor_deactivation_scan_interval == DEFAULT_ACTOR_SCAN_INTERVAL
    assert config.actor_idle_timeout == DEFAULT_ACTOR_IDLE_TIMEOUT
    assert config.drain_ongoing_call_timeout == DEFAULT_ONGOING_CALL_TIMEOUT
    assert config.heartbeat_interval == DEFAULT_HEARTBEAT_INTERVAL
    assert config.drain_rebalanced_actors is False


def test_parsed_durations_override_defaults():
    config = new_config("host", "app", "placement:50005", ["cat"], 50001, "10s", "2m", "30s", True)
    assert config.actor_deactivation_scan_interval == timedelta(seconds=10)
    assert config.actor_idle_timeout == timedelta(minutes=2)
    assert config.drain_ongoing_call_timeout == timedelta(seconds=30)
    assert config.drain_rebalanced_actors is True
    assert config.hosted_actor_types == ["cat"]
    assert config.port == 50001
    assert config.placement_service_address == "placement:50005"
    assert config.host_address == "host"


def test_invalid_duration_falls_back_to_default():
    config = new_config("", "", "", [], 0, "bogus", "5", "1h", False)
    assert config.actor_deactivation_scan_interval == DEFAULT_ACTOR_SCAN_INTERVAL
    assert config.actor_idle_timeout == DEFAULT_ACTOR_IDLE_TIMEOUT
    assert config.drain_ongoing_call_timeout == timedelta(hours=1)


def test_hosted_actors_are_copied():
    hosted = ["cat", "dog"]
    config = new_config("", "", "", hosted, 0, "", "", "", False)
    hosted.append("bird")
    assert config.hosted_actor_types == ["cat", "dog"]


def test_default_config_matches_new_config_defaults():
    assert ActorConfig() == new_config("", "", "", None, 0, "", "", "", False)