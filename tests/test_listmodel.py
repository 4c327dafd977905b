import pytest

from cryptoinfo.listmodel import ListModel, Signal


@pytest.fixture
def model():
    m = ListModel(str)
    for name in ("a", "b", "c"):
        m.append(name)
    return m


def record(signal):
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls


def test_signal_calls_slots_in_order():
    signal = Signal()
    seen = []
    signal.connect(lambda x: seen.append(("first", x)))
    signal.connect(lambda x: seen.append(("second", x)))
    signal.emit(7)
    assert seen == [("first", 7), ("second", 7)]


def test_append_grows_and_notifies():
    m = ListModel(str)
    counts = record(m.count_changed)
    m.append("x")
    m.append("y")
    assert m.items() == ["x", "y"]
    assert len(m) == 2
    assert len(counts) == 2
    assert not m.is_empty()


def test_empty_model():
    m = ListModel(str)
    assert m.is_empty()
    assert m.item_list() == []


def test_insert_rows_inserts_defaults(model):
    assert model.insert_rows(1, 2) is True
    assert model.items() == ["a", "", "", "b", "c"]


def test_insert_rows_at_end(model):
    assert model.insert_rows(3, 1) is True
    assert model.items() == ["a", "b", "c", ""]


@pytest.mark.parametrize("row,count", [(0, 0), (4, 1), (-1, 1)])
def test_insert_rows_rejects_bad_ranges(model, row, count):
    assert model.insert_rows(row, count) is False
    assert model.items() == ["a", "b", "c"]


def test_remove_rows(model):
    assert model.remove_rows(0, 2) is True
    assert model.items() == ["c"]


@pytest.mark.parametrize("row,count", [(0, 0), (2, 2), (3, 1)])
def test_remove_rows_rejects_bad_ranges(model, row, count):
    assert model.remove_rows(row, count) is False
    assert len(model) == 3


def test_swap_row_emits_both_rows(model):
    changes = record(model.data_changed)
    model.swap_row(0, 2)
    assert model.items() == ["c", "b", "a"]
    assert changes == [(0, 0), (2, 2)]


def test_swap_row_out_of_range_is_ignored(model):
    changes = record(model.data_changed)
    model.swap_row(0, 3)
    assert model.items() == ["a", "b", "c"]
    assert changes == []


def test_up_and_down_row(model):
    model.up_row(0)
    assert model.items() == ["a", "b", "c"]
    model.up_row(2)
    assert model.items() == ["a", "c", "b"]
    model.down_row(0)
    assert model.items() == ["c", "a", "b"]
    model.down_row(2)
    assert model.items() == ["c", "a", "b"]


def test_set_replaces_in_range_only(model):
    model.set(1, "z")
    model.set(3, "q")
    model.set(-1, "q")
    assert model.items() == ["a", "z", "c"]


def test_set_all_shrinks(model):
    model.set_all(["x"])
    assert model.items() == ["x"]


def test_set_all_grows(model):
    items = ["p", "q", "r", "s"]
    model.set_all(items)
    assert model.items() == items


def test_items_changed_clamps_to_length(model):
    changes = record(model.data_changed)
    model.items_changed(0, 10)
    model.items_changed(5, 10)
    assert changes == [(0, len(model))]


def test_item_out_of_range_gives_default(model):
    assert model.item(1) == "b"
    assert model.item(10) == ""


def test_item_list_is_a_copy(model):
    copy = model.item_list()
    copy.append("d")
    assert model.items() == ["a", "b", "c"]


def test_clear_resets_and_notifies(model):
    counts = record(model.count_changed)
    resets = record(model.model_reset)
    model.clear()
    assert model.is_empty()
    assert len(counts) == 1
    assert len(resets) == 1