import asyncio

import pytest

from average_calculator.window.store import MergeResult, WindowStore, mean


@pytest.fixture
def store():
    return WindowStore(10)


@pytest.mark.asyncio
async def test_merge_into_empty_window(store):
    result = await store.merge([4, 8, 15, 16, 23, 42])
    assert result.previous == []
    assert result.current == [4, 8, 15, 16, 23, 42]
    assert round(result.average, 2) == 18.0


@pytest.mark.asyncio
async def test_merge_skips_values_already_in_window(store):
    await store.merge([4, 8, 15, 16, 23, 42])
    result = await store.merge([42, 16, 7, 8])
    assert result.previous == [4, 8, 15, 16, 23, 42]
    assert result.current == [4, 8, 15, 16, 23, 42, 7]
    assert round(result.average, 2) == 16.43


@pytest.mark.asyncio
async def test_merge_dedups_within_batch_first_seen_wins(store):
    result = await store.merge([3, 1, 3, 2, 1])
    assert result.current == [3, 1, 2]


@pytest.mark.asyncio
async def test_overflow_evicts_oldest_first(store):
    await store.merge([4, 8, 15, 16, 23, 42, 7])
    result = await store.merge(list(range(1, 12)))
    # 4, 7 and 8 are already present; 8 new values overflow by 5
    assert result.current == [42, 7, 1, 2, 3, 5, 6, 9, 10, 11]


@pytest.mark.asyncio
async def test_batch_larger_than_capacity_keeps_last_values(store):
    await store.merge([100, 200, 300])
    result = await store.merge(list(range(1, 12)))
    assert result.current == [2, 3, 4, 5, 6, 7, 8, 9, 10, 11]


@pytest.mark.asyncio
async def test_empty_merge_is_a_noop(store):
    await store.merge([1, 2, 3])
    before = await store.average()
    result = await store.merge([])
    assert result.previous == result.current == [1, 2, 3]
    assert await store.average() == before


@pytest.mark.asyncio
async def test_repeated_merge_changes_nothing(store):
    batch = [5, 9, 5, 13, 21]
    first = await store.merge(batch)
    second = await store.merge(batch)
    assert second.previous == first.current
    assert second.current == first.current


@pytest.mark.asyncio
async def test_capacity_holds_across_merges():
    store = WindowStore(4)
    for start in range(0, 40, 3):
        result = await store.merge(range(start, start + 5))
        assert len(result.current) <= 4
        assert len(set(result.current)) == len(result.current)


@pytest.mark.asyncio
async def test_survivors_keep_relative_order():
    store = WindowStore(5)
    await store.merge([1, 2, 3, 4, 5])
    result = await store.merge([6, 7])
    assert result.current == [3, 4, 5, 6, 7]


@pytest.mark.asyncio
async def test_snapshots_are_independent_copies(store):
    result = await store.merge([1, 2])
    await store.merge([3])
    assert result.current == [1, 2]
    snap = await store.snapshot()
    snap.append(99)
    assert await store.snapshot() == [1, 2, 3]


@pytest.mark.asyncio
async def test_average_of_empty_window_is_zero(store):
    assert await store.average() == 0


@pytest.mark.asyncio
async def test_concurrent_merges_apply_in_sequence():
    store = WindowStore(10)
    batches = [list(range(i * 10, i * 10 + 10)) for i in range(20)]
    results = await asyncio.gather(*(store.merge(b) for b in batches))
    # Every previous state is either empty or another merge's current state
    finals = {tuple(r.current) for r in results}
    previous = {tuple(r.previous) for r in results}
    assert len(finals) == 20
    assert previous - finals == {()}
    assert finals - previous == {tuple(await store.snapshot())}


@pytest.mark.asyncio
async def test_merge_and_reads_wait_for_the_lock():
    store = WindowStore(3)
    await store.merge([1, 2, 3])

    async with store._lock:
        merge_task = asyncio.create_task(store.merge([4]))
        snapshot_task = asyncio.create_task(store.snapshot())
        average_task = asyncio.create_task(store.average())
        await asyncio.sleep(0.01)
        assert not merge_task.done()
        assert not snapshot_task.done()
        assert not average_task.done()
        assert list(store._window) == [1, 2, 3]

    result = await merge_task
    assert result.previous == [1, 2, 3]
    assert result.current == [2, 3, 4]
    # Waiters are served in order, so reads queued after the merge see it whole
    assert await snapshot_task == [2, 3, 4]
    assert await average_task == 3


def test_non_positive_capacity_rejected():
    with pytest.raises(ValueError):
        WindowStore(0)


def test_mean_helper():
    assert mean([]) == 0
    assert mean([1, 2, 3, 4]) == 2.5
    assert MergeResult(previous=[], current=[]).average == 0
