from __future__ import annotations

import threading

import pytest

from gaussiantrack.plugin.window_slot import WindowSlot


def test_empty_slot_is_closed(slot: WindowSlot) -> None:
    assert slot.is_open is False
    assert slot.current is None
    assert slot.release() is None


def test_acquire_builds_once_then_reuses(slot: WindowSlot) -> None:
    built = []

    def factory() -> object:
        built.append(object())
        return built[-1]

    first, created_first = slot.acquire_or_reuse(factory)
    second, created_second = slot.acquire_or_reuse(factory)

    assert created_first is True
    assert created_second is False
    assert first is second
    assert len(built) == 1
    assert slot.is_open is True


def test_failing_factory_leaves_slot_empty(slot: WindowSlot) -> None:
    def factory() -> object:
        raise RuntimeError("no display")

    with pytest.raises(RuntimeError):
        slot.acquire_or_reuse(factory)
    assert slot.is_open is False


def test_release_with_stale_window_keeps_newer_one(slot: WindowSlot) -> None:
    old, new = object(), object()
    slot.claim(old)
    assert slot.release(old) is old
    slot.claim(new)

    assert slot.release(old) is None
    assert slot.current is new


def test_claim_only_succeeds_on_empty_slot(slot: WindowSlot) -> None:
    first, second = object(), object()
    assert slot.claim(first) is True
    assert slot.claim(first) is True
    assert slot.claim(second) is False
    assert slot.current is first


def test_concurrent_acquire_builds_a_single_window(slot: WindowSlot) -> None:
    built = []
    barrier = threading.Barrier(8)
    results = []

    def factory() -> object:
        built.append(object())
        return built[-1]

    def worker() -> None:
        barrier.wait()
        results.append(slot.acquire_or_reuse(factory)[0])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(built) == 1
    assert all(window is built[0] for window in results)
