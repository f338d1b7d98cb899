"""Tests for the session controller."""

import json
from datetime import date

import pytest
import requests

from tests.fakes import FakeResponse, FakeSession
from yuzuorders.models.common import SyncState
from yuzuorders.services.controller import OrderController
from yuzuorders.services.order_store import seed_table
from yuzuorders.services.sheet_sync import SheetSync
from yuzuorders.storage.local_store import LocalOrderStorage

SYNC_URL = "http://proxy.test/sync"


@pytest.fixture
def storage(temp_dir):
    return LocalOrderStorage(str(temp_dir / "orders.json"))


def make_controller(storage=None, *responses, table=None):
    sync = SheetSync(SYNC_URL, session=FakeSession(*responses)) if responses else None
    return OrderController(
        today=date(2025, 1, 15),
        storage=storage,
        sync=sync,
        table=table,
    )


class TestWindow:
    """Tests for window state."""

    def test_starts_centered_on_today(self):
        controller = make_controller()
        view = controller.snapshot()

        assert view.offset == 0
        assert view.center_key == "2025-01-15"
        assert view.is_today_centered
        assert view.labels[2] == "Jan 15"

    def test_shift_accumulates(self):
        controller = make_controller()

        controller.shift(1)
        view = controller.shift(1)

        assert view.offset == 2
        assert view.center_key == "2025-01-17"
        assert not view.is_today_centered

    def test_today_fixed(self):
        controller = make_controller()
        controller.shift(-10)

        assert controller.today == date(2025, 1, 15)
        assert controller.reset_offset().center_key == "2025-01-15"

    def test_defaults_to_current_date(self):
        assert OrderController().today == date.today()


class TestEdits:
    """Tests for editing and local persistence."""

    def test_starts_with_seed_table(self):
        assert make_controller().table == seed_table()

    def test_update_persists(self, storage):
        controller = make_controller(storage)

        controller.update("tofu", '9"', "2025-01-15", 4)

        assert controller.get("tofu", '9"', "2025-01-15") == 4
        assert storage.load()["tofu"]['9"'] == {"2025-01-15": 4}

    def test_update_replaces_table_reference(self):
        controller = make_controller()
        before = controller.table

        controller.update("tofu", '9"', "2025-01-15", 4)

        assert controller.table is not before
        assert before["tofu"]['9"'] == {}

    def test_load_local_prefers_saved_table(self, storage, sample_table):
        storage.save(sample_table)
        controller = make_controller(storage)

        assert controller.load_local() == sample_table

    def test_load_local_falls_back_to_seed(self, storage):
        assert make_controller(storage).load_local() == seed_table()

    def test_load_local_bad_inner_shape_falls_back_to_seed(self, storage):
        storage.path.write_text(
            json.dumps({"tofu": {"9\"": None}, "yuzu": [1]}), encoding="utf-8"
        )
        controller = make_controller(storage)

        assert controller.load_local() == seed_table()
        assert controller.get("tofu", '9"', "2025-01-15") == 0


class TestSync:
    """Tests for load and save through the controller."""

    def test_load_remote_replaces_table(self, storage):
        controller = make_controller(storage, FakeResponse(200, {
            "header": ["Item", "2025-01-15"],
            "rows": [{"item": 'tofu 9"', "values": [4]}],
        }))

        result = controller.load_remote()

        assert result.success
        assert controller.table == {"tofu": {'9"': {"2025-01-15": 4}}}
        assert storage.load() == controller.table
        assert controller.last_sync is result

    def test_load_remote_empty_sheet_keeps_local(self, sample_table):
        controller = make_controller(
            None,
            FakeResponse(200, {"header": ["Item"], "rows": []}),
            table=sample_table,
        )

        result = controller.load_remote()

        assert result.state == SyncState.FAILED
        assert controller.table is sample_table

    def test_load_remote_network_error_keeps_local(self, sample_table):
        controller = make_controller(
            None,
            requests.ConnectionError("offline"),
            table=sample_table,
        )

        assert not controller.load_remote().success
        assert controller.table is sample_table

    def test_save_does_not_touch_local_state(self, sample_table):
        controller = make_controller(None, FakeResponse(200), table=sample_table)

        result = controller.save()

        assert result.success
        assert controller.table is sample_table

    def test_save_sends_snapshot(self, sample_table):
        session = FakeSession(FakeResponse(200))
        controller = OrderController(
            today=date(2025, 1, 15),
            sync=SheetSync(SYNC_URL, session=session),
            table=sample_table,
        )

        controller.save(include_history=False)

        body = session.calls[0]["json"]
        assert body["header"] == [
            "Item", "2025-01-13", "2025-01-14", "2025-01-15", "2025-01-16", "2025-01-17",
        ]

    def test_without_sync_endpoint(self):
        controller = make_controller()

        assert not controller.load_remote().success
        assert not controller.save().success
