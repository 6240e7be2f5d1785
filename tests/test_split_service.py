"""Tests for split id sequencing and exercise-list reconciliation."""

import asyncio

import pytest

from services.split_service import (
    allocate_split_id,
    current_max_split_id,
    next_split_id,
    reconcile_exercises,
)


def test_next_split_id_starts_at_one():
    assert next_split_id(None) == 1


def test_next_split_id_follows_max():
    assert next_split_id(7) == 8


def test_reconcile_removes_then_appends():
    result = reconcile_exercises([1, 2, 3], to_add=[4], to_remove=[2])

    assert result.exercises == [1, 3, 4]
    assert result.removed == 1
    assert result.added == [4]
    assert result.total_exercises == 3


def test_reconcile_id_in_both_sets_ends_up_present():
    result = reconcile_exercises([1, 2], to_add=[2], to_remove=[2])

    assert result.exercises == [1, 2]
    assert result.removed == 1


def test_reconcile_does_not_duplicate_existing_ids():
    result = reconcile_exercises([1, 2], to_add=[1, 3], to_remove=[])

    assert result.exercises == [1, 2, 3]
    assert result.removed == 0
    # the submitted add list is reported verbatim
    assert result.added == [1, 3]


def test_reconcile_collapses_repeats_in_add_list():
    result = reconcile_exercises([5], to_add=[6, 6, 7], to_remove=[])

    assert result.exercises == [5, 6, 7]


def test_reconcile_counts_every_removed_match():
    result = reconcile_exercises([1, 2, 1, 3], to_add=[], to_remove=[1])

    assert result.exercises == [2, 3]
    assert result.removed == 2


def test_reconcile_drops_duplicates_left_by_legacy_appends():
    result = reconcile_exercises([4, 5, 4], to_add=[], to_remove=[])

    assert result.exercises == [4, 5]
    assert result.removed == 0


def test_reconcile_ignores_unknown_removals():
    result = reconcile_exercises([1, 2], to_add=[], to_remove=[9])

    assert result.exercises == [1, 2]
    assert result.removed == 0


@pytest.mark.parametrize(
    "current, to_add, to_remove",
    [
        ([1, 2, 3], [4], [2]),
        ([1, 2], [1, 3], []),
        ([], [8, 9], [1]),
        ([3, 1, 3, 2], [5, 1], [2]),
    ],
)
def test_reconcile_is_idempotent(current, to_add, to_remove):
    once = reconcile_exercises(current, to_add, to_remove).exercises
    twice = reconcile_exercises(once, to_add, to_remove).exercises

    assert twice == once


def test_reconcile_does_not_mutate_input():
    current = [1, 2, 3]
    reconcile_exercises(current, to_add=[4], to_remove=[1])

    assert current == [1, 2, 3]


def test_allocate_split_id_on_empty_collection(store, run):
    assert run(current_max_split_id(store)) is None
    assert run(allocate_split_id(store)) == 1
    assert run(allocate_split_id(store)) == 2


def test_allocate_split_id_follows_stored_max_with_gaps(store, run):
    run(store.splits.insert_many([
        {"splitId": 1, "split_name": "Push", "exercises": []},
        {"splitId": 5, "split_name": "Pull", "exercises": []},
    ]))

    assert run(current_max_split_id(store)) == 5
    assert run(allocate_split_id(store)) == 6


def test_allocate_split_id_does_not_reuse_deleted_max(store, run):
    first = run(allocate_split_id(store))
    run(store.splits.insert_one({"splitId": first, "split_name": "Legs", "exercises": []}))
    run(store.splits.delete_one({"splitId": first}))

    assert run(allocate_split_id(store)) == first + 1


def test_allocate_split_id_matches_next_split_id(store, run):
    run(store.splits.insert_one({"splitId": 9, "split_name": "Arms", "exercises": []}))

    assert run(allocate_split_id(store)) == next_split_id(9)


def test_concurrent_allocations_get_distinct_ids(store, run):
    async def allocate_many(count):
        return await asyncio.gather(*(allocate_split_id(store) for _ in range(count)))

    ids = run(allocate_many(20))

    assert len(set(ids)) == 20
    assert sorted(ids) == list(range(1, 21))
