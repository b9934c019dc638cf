"""Tests for ValkeyClient wrapper logic with redis-py mocked out."""

from unittest.mock import Mock, patch

import pytest


@pytest.fixture
def redis_mock():
    mock = Mock()
    with patch("clients.valkey_client.redis.from_url", return_value=mock) as from_url:
        yield mock, from_url


@pytest.fixture
def client(redis_mock):
    from clients.valkey_client import ValkeyClient

    return ValkeyClient("redis://localhost:6379/0")


class TestInit:

    def test_connects_and_pings(self, redis_mock, client):
        mock, from_url = redis_mock
        from_url.assert_called_once_with("redis://localhost:6379/0", decode_responses=True)
        mock.ping.assert_called_once()

    def test_exported_from_clients_package(self):
        from clients import ValkeyClient
        from clients.valkey_client import ValkeyClient as direct

        assert ValkeyClient is direct


class TestSets:

    def test_set_members_returns_set(self, redis_mock, client):
        mock, _ = redis_mock
        mock.smembers.return_value = ["view:/a", "view:/b"]

        assert client.set_members("view-keys:/a") == {"view:/a", "view:/b"}

    def test_add_to_set(self, redis_mock, client):
        mock, _ = redis_mock
        client.add_to_set("view-keys:/a", "view:/a")
        mock.sadd.assert_called_once_with("view-keys:/a", "view:/a")


class TestDelete:

    def test_no_keys_skips_redis(self, redis_mock, client):
        mock, _ = redis_mock
        assert client.delete() == 0
        mock.delete.assert_not_called()

    def test_returns_deleted_count(self, redis_mock, client):
        mock, _ = redis_mock
        mock.delete.return_value = 2
        assert client.delete("a", "b", "c") == 2


class TestSet:

    def test_with_expiration_uses_setex(self, redis_mock, client):
        mock, _ = redis_mock
        client.set("k", "v", expire_seconds=30)
        mock.setex.assert_called_once_with("k", 30, "v")

    def test_json_roundtrip_through_strings(self, redis_mock, client):
        mock, _ = redis_mock
        client.set_json("k", [{"amount": 4550}])
        stored = mock.set.call_args.args[1]
        mock.get.return_value = stored

        assert client.get_json("k") == [{"amount": 4550}]
