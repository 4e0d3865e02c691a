import random

import pytest

from dskit.sorting import (
    MaxHeap,
    binary_insertion_sort,
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    top_k,
)

SAMPLE = [5, 3, 4, 6, 9, 8, 2, 1, 0, 7]


def test_sorts_sample():
    expected = sorted(SAMPLE)
    assert bubble_sort(SAMPLE) == expected
    assert quick_sort(SAMPLE) == expected
    assert insertion_sort(SAMPLE) == expected
    assert binary_insertion_sort(SAMPLE) == expected
    assert shell_sort(SAMPLE) == expected
    assert selection_sort(SAMPLE) == expected
    assert merge_sort(SAMPLE) == expected
    assert heap_sort(SAMPLE) == expected


def test_sample_result_is_pinned():
    assert bubble_sort(SAMPLE) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert heap_sort(SAMPLE) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_does_not_mutate_input():
    data = list(SAMPLE)
    bubble_sort(data)
    quick_sort(data)
    insertion_sort(data)
    binary_insertion_sort(data)
    shell_sort(data)
    selection_sort(data)
    merge_sort(data)
    heap_sort(data)
    assert data == SAMPLE


@pytest.mark.parametrize("seed", range(5))
def test_random_with_duplicates(seed):
    rng = random.Random(seed)
    data = [rng.randint(-20, 20) for _ in range(rng.randint(0, 60))]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert binary_insertion_sort(data) == expected
    assert shell_sort(data) == expected
    assert selection_sort(data) == expected
    assert merge_sort(data) == expected
    assert heap_sort(data) == expected


def test_trivial_inputs():
    assert bubble_sort([]) == []
    assert quick_sort([]) == []
    assert insertion_sort([]) == []
    assert binary_insertion_sort([]) == []
    assert shell_sort([]) == []
    assert selection_sort([]) == []
    assert merge_sort([]) == []
    assert heap_sort([]) == []
    assert bubble_sort([42]) == [42]
    assert quick_sort([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert binary_insertion_sort([42]) == [42]
    assert shell_sort([42]) == [42]
    assert selection_sort([42]) == [42]
    assert merge_sort([42]) == [42]
    assert heap_sort([42]) == [42]


def test_presorted_and_reversed():
    data = list(range(200))
    assert bubble_sort(data) == data
    assert quick_sort(data) == data
    assert insertion_sort(data) == data
    assert binary_insertion_sort(data) == data
    assert shell_sort(data) == data
    assert selection_sort(data) == data
    assert merge_sort(data) == data
    assert heap_sort(data) == data
    assert bubble_sort(reversed(data)) == data
    assert quick_sort(reversed(data)) == data
    assert insertion_sort(reversed(data)) == data
    assert binary_insertion_sort(reversed(data)) == data
    assert shell_sort(reversed(data)) == data
    assert selection_sort(reversed(data)) == data
    assert merge_sort(reversed(data)) == data
    assert heap_sort(reversed(data)) == data


def test_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = sorted(words)
    assert bubble_sort(words) == expected
    assert quick_sort(words) == expected
    assert insertion_sort(words) == expected
    assert binary_insertion_sort(words) == expected
    assert shell_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected
    assert heap_sort(words) == expected


@pytest.mark.parametrize("k", range(len(SAMPLE) + 1))
def test_top_k_matches_largest(k):
    assert top_k(SAMPLE, k) == sorted(SAMPLE, reverse=True)[:k]


@pytest.mark.parametrize("seed", range(5))
def test_top_k_random(seed):
    rng = random.Random(seed)
    data = [rng.randint(0, 50) for _ in range(40)]
    k = rng.randint(0, 40)
    assert top_k(data, k) == sorted(data, reverse=True)[:k]


@pytest.mark.parametrize("k", [-1, len(SAMPLE) + 1])
def test_top_k_rejects_bad_k(k):
    with pytest.raises(ValueError):
        top_k(SAMPLE, k)


def test_heap_pops_in_descending_order():
    heap = MaxHeap(SAMPLE)
    assert len(heap) == len(SAMPLE)
    popped = [heap.pop() for _ in range(len(SAMPLE))]
    assert popped == sorted(SAMPLE, reverse=True)
    assert len(heap) == 0


def test_heap_push_and_peek():
    heap = MaxHeap(SAMPLE)
    heap.push(9999)
    assert heap.peek() == 9999
    assert len(heap) == len(SAMPLE) + 1
    assert heap.pop() == 9999
    assert heap.peek() == max(SAMPLE)


def test_heap_push_into_empty():
    heap = MaxHeap()
    for value in SAMPLE:
        heap.push(value)
        assert heap.peek() == max(SAMPLE[: SAMPLE.index(value) + 1])
    assert [heap.pop() for _ in SAMPLE] == sorted(SAMPLE, reverse=True)


def test_heap_empty_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_heap_sort_after_push_and_pop():
    data = SAMPLE + [9999]
    assert heap_sort(data) == sorted(data)
    heap = MaxHeap(data)
    heap.pop()
    remaining = [heap.pop() for _ in range(len(heap))]
    assert heap_sort(remaining) == sorted(SAMPLE)