import pytest

from hexscene.linked_node import ListNode


def test_single_node_is_its_own_ring():
    node = ListNode("a")
    assert node.next is node
    assert node.prev is node
    assert list(node) == ["a"]


def test_link_after_builds_ring_in_order():
    a, b, c = ListNode("a"), ListNode("b"), ListNode("c")
    b.link_after(a)
    c.link_after(b)
    assert list(a) == ["a", "b", "c"]
    assert a.prev is c
    assert len(a) == 3


def test_unlink_removes_node():
    a, b, c = ListNode("a"), ListNode("b"), ListNode("c")
    b.link_after(a)
    c.link_after(b)
    b.unlink()
    assert list(a) == ["a", "c"]
    assert list(b) == ["b"]


def test_link_after_moves_between_rings():
    a, b, c = ListNode(1), ListNode(2), ListNode(3)
    b.link_after(a)
    b.link_after(c)
    assert list(a) == [1]
    assert list(c) == [3, 2]


def test_link_after_self_raises():
    node = ListNode()
    with pytest.raises(ValueError):
        node.link_after(node)