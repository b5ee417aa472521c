from ssenum.generation.subsets import combination_indices, count_subsets, subsets


def test_power_set_of_four_items_is_exhaustive_and_duplicate_free():
    items = ["a", "b", "c", "d"]
    result = list(subsets(items, 0, 4))
    assert len(result) == 16
    as_sets = {frozenset(s) for s in result}
    assert len(as_sets) == 16
    assert frozenset() in as_sets and frozenset(items) in as_sets
    assert count_subsets(4, 0, 4) == 16


def test_sizes_ascend_and_each_size_is_lexicographic():
    result = list(subsets(["a", "b", "c", "d"], 1, 2))
    assert result == [
        ("a",), ("b",), ("c",), ("d",),
        ("a", "b"), ("a", "c"), ("a", "d"), ("b", "c"), ("b", "d"), ("c", "d"),
    ]


def test_combination_indices_advance_rightmost_movable_index():
    assert list(combination_indices(5, 3)) == [
        (0, 1, 2), (0, 1, 3), (0, 1, 4), (0, 2, 3), (0, 2, 4),
        (0, 3, 4), (1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4),
    ]
    assert list(combination_indices(3, 0)) == [()]
    assert list(combination_indices(2, 3)) == []


def test_max_size_is_clamped_and_none_means_all():
    assert len(list(subsets([1, 2, 3], 2, 10))) == 4
    assert len(list(subsets([1, 2, 3]))) == 8
    assert list(subsets([1, 2], 3, 5)) == []
    assert list(subsets([], 0, 0)) == [()]
    assert count_subsets(3, 2, 10) == 4


def test_predicate_is_evaluated_once_per_subset_and_filters():
    seen = []

    def even_sum(s):
        seen.append(s)
        return sum(s) % 2 == 0

    result = list(subsets([1, 2, 3], 0, 3, even_sum))
    assert result == [(), (2,), (1, 3), (1, 2, 3)]
    assert len(seen) == 8
    assert len(set(seen)) == 8


def test_subsets_are_lazy():
    gen = subsets(list(range(30)), 0, 30)
    first = [next(gen) for _ in range(3)]
    assert first == [(), (0,), (1,)]
