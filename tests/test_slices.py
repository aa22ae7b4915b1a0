import pytest

from lemonlab.slices import Slice, format_slice


def test_make_is_zero_filled():
    numbers = Slice.make(3, 5)
    assert len(numbers) == 3
    assert numbers.cap == 5
    assert list(numbers) == [0, 0, 0]


def test_make_without_capacity_matches_length():
    numbers = Slice.make(3)
    assert numbers.cap == len(numbers) == 3


@pytest.mark.parametrize("length,capacity", [(-1, None), (4, 2)])
def test_make_rejects_invalid_sizes(length, capacity):
    with pytest.raises(ValueError):
        Slice.make(length, capacity)


def test_append_within_capacity():
    numbers = Slice.make(3, 5).append(1)
    assert list(numbers) == [0, 0, 0, 1]
    assert numbers.cap == 5


def test_append_past_full_capacity_doubles_small():
    numbers = Slice.make(3, 5).append(1).append(2).append(3)
    assert len(numbers) == 6
    assert numbers.cap == 10
    numbers2 = Slice.make(3).append(1)
    assert numbers2.cap == 6


def test_append_within_capacity_shares_storage():
    base = Slice.make(3, 5)
    grown = base.append(1)
    grown[0] = 9
    assert base[0] == 9
    assert len(base) == 3


def test_append_past_capacity_reallocates():
    base = Slice([1, 2, 3])
    grown = base.append(4)
    grown[0] = 100
    assert base[0] == 1
    assert list(grown)[1:] == [2, 3, 4]


@pytest.mark.parametrize("start", [0, 1, 7, 255, 256, 1000, 5000])
def test_growth_invariants(start):
    base = Slice.make(start)
    grown = base.append(1)
    assert grown.cap >= len(grown) == start + 1
    assert grown.cap > base.cap


def test_nil_slice():
    empty = Slice()
    assert empty.is_nil
    assert not Slice([]).is_nil
    grown = empty.append(0).append(1).append(2, 3, 4)
    assert not grown.is_nil
    assert list(grown) == [0, 1, 2, 3, 4]
    assert grown.cap >= len(grown)


def test_subslices():
    numbers = Slice([0, 1, 2, 3, 4, 5, 6, 7, 8])
    assert list(numbers[1:4]) == [1, 2, 3]
    assert list(numbers[:3]) == [0, 1, 2]
    assert list(numbers[4:]) == [4, 5, 6, 7, 8]
    part = numbers[2:5]
    assert part.cap == numbers.cap - 2


def test_subslice_shares_storage_and_may_extend_to_capacity():
    numbers = Slice([0, 1, 2, 3, 4])
    head = numbers[:2]
    head[1] = 42
    assert numbers[1] == 42
    assert list(head[0:4]) == [0, 42, 2, 3]


def test_subslice_out_of_range():
    numbers = Slice([1, 2, 3])
    assert list(numbers[1:3]) == [2, 3]
    with pytest.raises(IndexError):
        numbers[2:5]
    with pytest.raises(ValueError):
        numbers[::2]


@pytest.mark.parametrize("index", [-1, 3])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Slice([1, 2, 3])[index]


def test_copy_from():
    s2 = Slice.make(3)
    count = s2.copy_from(Slice([1, 2, 3]))
    assert count == 3
    assert str(s2) == "[1 2 3]"


def test_copy_from_stops_at_shorter():
    target = Slice.make(2)
    assert target.copy_from([7, 8, 9]) == 2
    assert list(target) == [7, 8]


def test_format_slice():
    assert format_slice(Slice.make(0, 5)) == "len=0 cap=5 slice=[]"
    assert format_slice([1, 2, 3]) == "len=3 cap=3 slice=[1 2 3]"