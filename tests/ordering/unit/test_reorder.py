import pytest

from nodesort.links.classify import classify_text
from nodesort.ordering.reorder import move_order, reorder, to_text

TEXT = "vless://a#One\nvless://b#Two\nvless://c#Three"


def test_reorder_follows_id_order_and_keeps_identity():
    nodes = classify_text(TEXT)
    ordered = reorder(nodes, [2, 0, 1])

    assert [n.id for n in ordered] == [2, 0, 1]
    assert ordered[0] is nodes[2]
    assert to_text(ordered) == "vless://c#Three\nvless://a#One\nvless://b#Two"


def test_reorder_rejects_unknown_duplicate_and_missing_ids():
    nodes = classify_text(TEXT)
    with pytest.raises(ValueError, match="Unknown node id"):
        reorder(nodes, [0, 1, 7])
    with pytest.raises(ValueError, match="Duplicate node id in order"):
        reorder(nodes, [0, 0, 1])
    with pytest.raises(ValueError, match="missing node ids: \\[2\\]"):
        reorder(nodes, [1, 0])


def test_reorder_rejects_duplicate_ids_in_items():
    nodes = classify_text(TEXT)
    with pytest.raises(ValueError, match="Duplicate node id in items"):
        reorder([nodes[0], nodes[0]], [0])


def test_move_order_drags_to_clamped_position():
    nodes = classify_text(TEXT)
    assert move_order(nodes, 2, 0) == [2, 0, 1]
    assert move_order(nodes, 0, 99) == [1, 2, 0]
    assert move_order(nodes, 1, -3) == [1, 0, 2]
    with pytest.raises(ValueError, match="Unknown node id"):
        move_order(nodes, 9, 0)


def test_to_text_of_empty_list():
    assert to_text([]) == ""
