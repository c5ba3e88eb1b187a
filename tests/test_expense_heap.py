import pytest

from balance_relocator.relocation import ExpenseHeap


def test_pop_max_returns_largest_first():
    h = ExpenseHeap()
    for i, amount in enumerate([3, 10, 1, 7]):
        h.push(amount, i)

    assert len(h) == 4
    assert h.peek_max() == 10
    assert [h.pop_max()[0] for _ in range(4)] == [10, 7, 3, 1]
    assert not h


def test_equal_amounts_keep_duplicates_earliest_index_first():
    h = ExpenseHeap()
    h.push(5, 3)
    h.push(5, 1)
    h.push(2, 0)

    assert h.pop_max() == (5, 1)
    assert h.pop_max() == (5, 3)
    assert h.pop_max() == (2, 0)


def test_empty_heap_raises():
    h = ExpenseHeap()
    with pytest.raises(IndexError):
        h.pop_max()
    with pytest.raises(IndexError):
        h.peek_max()


@pytest.mark.parametrize("amount", [0, -4])
def test_non_positive_amount_is_rejected(amount):
    with pytest.raises(ValueError):
        ExpenseHeap().push(amount)
