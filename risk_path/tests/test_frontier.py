import pytest

from risk_path.src.search.frontier import PriorityQueue


def test_pops_smallest_key_first():
    pq = PriorityQueue(key=lambda entry: entry[1])
    for entry in [(0, 5), (1, 2), (2, 9), (3, 2)]:
        pq.push(entry)
    assert len(pq) == 4
    assert pq.peek() == (1, 2)
    assert [pq.pop() for _ in range(4)] == [(1, 2), (3, 2), (0, 5), (2, 9)]
    assert not pq


def test_items_need_not_be_comparable():
    pq = PriorityQueue(key=lambda item: item["d"])
    pq.push({"d": 3})
    pq.push({"d": 3})
    pq.push({"d": 1})
    assert pq.pop() == {"d": 1}


def test_pop_empty_raises():
    pq = PriorityQueue(key=lambda x: x)
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.peek()
