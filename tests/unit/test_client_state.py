"""Unit tests for the persisted client state store."""

import json

import pytest

from fintrack.client import AuthState, CachedNotification, FinanceClient, NotConnectedError, StateStore, UserData


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "state" / "app_store.json"


def _notification(id: str, is_read: bool = False) -> CachedNotification:
    return CachedNotification(id=id, notification_type="bill_reminder", message="Rent due", is_read=is_read)


class TestStateStore:
    def test_defaults_when_file_missing(self, store_path):
        store = StateStore(store_path)

        assert store.state.auth_state.is_authenticated is False
        assert store.state.auth_state.jwt_token == ""
        assert store.state.notification_state == []
        assert store.state.global_ui_state.is_notification_center_open is False
        assert not store_path.exists()

    def test_actions_persist_and_reload(self, store_path):
        store = StateStore(store_path)
        store.set_auth_state(
            AuthState(
                jwt_token="tok",
                user_data=UserData(id="u1", email="a@example.com", name="A"),
                is_authenticated=True,
            )
        )
        store.add_notification(_notification("n1"))
        store.set_notification_center_open(True)

        reloaded = StateStore(store_path)
        assert reloaded.state.auth_state.jwt_token == "tok"
        assert reloaded.state.auth_state.user_data.email == "a@example.com"
        assert [n.id for n in reloaded.state.notification_state] == ["n1"]
        assert reloaded.state.global_ui_state.is_notification_center_open is True

    def test_update_auth_state_merges(self, store_path):
        store = StateStore(store_path)
        store.set_auth_state(AuthState(jwt_token="tok", is_authenticated=True))

        store.update_auth_state(jwt_token="tok2")

        assert store.state.auth_state.jwt_token == "tok2"
        assert store.state.auth_state.is_authenticated is True

    def test_logout_clears_auth_only(self, store_path):
        store = StateStore(store_path)
        store.set_auth_state(AuthState(jwt_token="tok", is_authenticated=True))
        store.add_notification(_notification("n1"))

        store.logout()

        assert store.token == ""
        assert store.state.auth_state.is_authenticated is False
        assert len(store.state.notification_state) == 1

    def test_mark_notification_as_read(self, store_path):
        store = StateStore(store_path)
        store.set_notifications([_notification("n1"), _notification("n2")])

        store.mark_notification_as_read("n2")

        assert store.unread_count == 1
        assert {n.id: n.is_read for n in store.state.notification_state} == {"n1": False, "n2": True}

    def test_mark_unknown_notification_is_noop(self, store_path):
        store = StateStore(store_path)
        store.set_notifications([_notification("n1")])

        store.mark_notification_as_read("missing")

        assert store.unread_count == 1

    def test_file_holds_only_persisted_slices(self, store_path):
        store = StateStore(store_path)
        store.set_notification_center_open(True)

        data = json.loads(store_path.read_text())
        assert set(data) == {"auth_state", "notification_state", "global_ui_state"}

    def test_corrupt_file_resets(self, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json")

        store = StateStore(store_path)

        assert store.state.auth_state.is_authenticated is False


class TestConnectionTier:
    @pytest.mark.asyncio
    async def test_connection_is_not_persisted(self, store_path):
        store = StateStore(store_path)
        client = FinanceClient("http://test", store)

        await client.connect()
        assert client.is_connected
        store.set_notification_center_open(True)
        await client.disconnect()

        assert not client.is_connected
        assert "http" not in store_path.read_text()

    @pytest.mark.asyncio
    async def test_request_requires_connection(self, store_path):
        client = FinanceClient("http://test", StateStore(store_path))

        with pytest.raises(NotConnectedError):
            await client.list_accounts()
