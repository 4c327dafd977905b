from cryptoinfo.tool.fundbook import FundBookItem, FundBookModel


def _model(tmp_path):
    return FundBookModel(tmp_path / "fundbook.json")


def test_save_load_round_trip(tmp_path):
    model = _model(tmp_path)
    model.add_item("2024-01", 1.5, 2.0, 3.0, 4.0)
    model.add_item("2024-02", 5.0, 6.0, 7.0, 8.0)
    model.save()
    loaded = _model(tmp_path)
    loaded.load()
    assert loaded.items() == model.items()


def test_load_malformed(tmp_path):
    (tmp_path / "fundbook.json").write_text('[{"time": "t", "crypto": "x"}]')
    model = _model(tmp_path)
    model.load()
    assert model.is_empty()


def test_stats(tmp_path):
    model = _model(tmp_path)
    model.add_item("a", 1, 2, 3, 4)
    assert model.stats() == "10, 1,2,3,4"


def test_up_join(tmp_path):
    model = _model(tmp_path)
    model.add_item("a", 1, 2, 3, 4)
    model.add_item("b", 1, 1, 1, 1)
    assert model.up_join_item(0) is False
    assert model.up_join_item(1) is True
    assert model.items() == [FundBookItem("a", 2, 3, 4, 5)]
    assert model.up_join_item(1) is False


def test_up_down_remove(tmp_path):
    model = _model(tmp_path)
    model.add_item("a", 0, 0, 0, 0)
    model.add_item("b", 0, 0, 0, 0)
    model.down_item(0)
    assert [i.time for i in model] == ["b", "a"]
    model.up_item(1)
    assert [i.time for i in model] == ["a", "b"]
    model.down_item(1)
    assert [i.time for i in model] == ["a", "b"]
    model.remove_item(0)
    assert [i.time for i in model] == ["b"]


def test_set_item_out_of_range(tmp_path):
    model = _model(tmp_path)
    model.add_item("a", 0, 0, 0, 0)
    model.set_item(3, "z", 1, 1, 1, 1)
    model.set_item(0, "c", 1, 1, 1, 1)
    assert [i.time for i in model] == ["c"]