# tests/test_transition_table.py
from markov_textgen.core.transition_table import TransitionTable, build


def test_build_accumulates_in_temporal_order():
    table = TransitionTable()
    build(["a", "b", "a", "c"], table)
    out = build(["a", "b"], table)
    assert out is table
    assert table.successors("a") == ["b", "c", "b"]
    assert table.successors("b") == ["a"]
    # "c" only ever appeared last
    assert "c" not in table


def test_build_noop_on_short_input():
    table = TransitionTable({"x": ["y"]})
    build([], table)
    build(["solo"], table)
    assert table == TransitionTable({"x": ["y"]})


def test_duplicates_are_kept():
    table = build(["a", "b", "a", "b", "a", "c"], TransitionTable())
    assert table.successors("a") == ["b", "b", "c"]
    assert table.transition_count() == 5


def test_unknown_token_has_no_successors_and_is_not_created():
    table = TransitionTable()
    assert table.successors("missing") == []
    assert len(table) == 0
    assert not table


def test_equality_ignores_key_order_but_not_value_order():
    a = TransitionTable({"x": ["1", "2"], "y": ["3"]})
    b = TransitionTable({"y": ["3"], "x": ["1", "2"]})
    c = TransitionTable({"x": ["2", "1"], "y": ["3"]})
    assert a == b
    assert a != c
    assert a != {"x": ["1", "2"], "y": ["3"]}


def test_to_dict_is_a_copy():
    table = TransitionTable({"x": ["y"]})
    d = table.to_dict()
    d["x"].append("z")
    d["new"] = []
    assert table.successors("x") == ["y"]
    assert "new" not in table
    assert TransitionTable.from_dict(table.to_dict()) == table


def test_clear_and_iteration():
    table = build(["a", "b", "c"], TransitionTable())
    assert sorted(table) == ["a", "b"]
    assert dict(table.items()) == {"a": ["b"], "b": ["c"]}
    table.clear()
    assert len(table) == 0
