"""Tests for the RWLock readers-writer lock.

Tests verify:
- Multiple concurrent readers
- Exclusive writer access
- Writer preference (new readers queue behind a waiting writer)
- Reentrant read locks
- Read-to-write upgrade, write reentry and write-to-read rejection
"""

import threading
import time

import pytest

from chronopattern.runtime.rwlock import RWLock


class TestRWLockBasics:
    """Test basic RWLock functionality."""

    def test_single_reader(self) -> None:
        """Single reader can acquire lock."""
        lock = RWLock()
        with lock.read():
            assert lock.reader_count == 1
        assert lock.reader_count == 0

    def test_single_writer(self) -> None:
        """Single writer can acquire lock."""
        lock = RWLock()
        with lock.write():
            assert lock.writer_active
        assert not lock.writer_active

    def test_multiple_reads_concurrent(self) -> None:
        """Multiple readers hold the lock simultaneously."""
        lock = RWLock()
        barrier = threading.Barrier(5, timeout=5)
        peak: list[int] = []

        def reader() -> None:
            with lock.read():
                barrier.wait()  # All five must be inside at once
                peak.append(lock.reader_count)

        threads = [threading.Thread(target=reader) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert max(peak) == 5

    def test_read_blocks_writers(self) -> None:
        """Readers block writers from acquiring lock."""
        lock = RWLock()
        reader_active = threading.Event()
        order: list[str] = []

        def reader() -> None:
            with lock.read():
                reader_active.set()
                time.sleep(0.05)
                order.append("reader-done")

        def writer() -> None:
            reader_active.wait()
            with lock.write():
                order.append("writer")

        threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert order == ["reader-done", "writer"]


class TestWriterPreference:
    """A waiting writer goes before readers that arrive after it."""

    def test_new_reader_waits_for_queued_writer(self) -> None:
        """Readers arriving while a writer waits are served after the writer."""
        lock = RWLock()
        first_reader_in = threading.Event()
        release_first_reader = threading.Event()
        order: list[str] = []

        def first_reader() -> None:
            with lock.read():
                first_reader_in.set()
                release_first_reader.wait(timeout=5)

        def writer() -> None:
            with lock.write():
                order.append("writer")

        def late_reader() -> None:
            with lock.read():
                order.append("late-reader")

        t1 = threading.Thread(target=first_reader)
        t1.start()
        first_reader_in.wait(timeout=5)

        t2 = threading.Thread(target=writer)
        t2.start()
        time.sleep(0.05)  # Writer is now queued
        t3 = threading.Thread(target=late_reader)
        t3.start()
        time.sleep(0.05)

        release_first_reader.set()
        for thread in (t1, t2, t3):
            thread.join()

        assert order == ["writer", "late-reader"]


class TestRWLockReentrancy:
    """Test reentrant reads and rejected acquisitions."""

    def test_reentrant_reads(self) -> None:
        """Same thread can nest read locks."""
        lock = RWLock()
        with lock.read(), lock.read(), lock.read():
            assert lock.reader_count == 1
        assert lock.reader_count == 0

    def test_reentrant_read_while_writer_waits(self) -> None:
        """A nested read does not deadlock behind a waiting writer."""
        lock = RWLock()
        writer_done = threading.Event()

        def writer() -> None:
            with lock.write():
                writer_done.set()

        with lock.read():
            thread = threading.Thread(target=writer)
            thread.start()
            time.sleep(0.05)  # Writer is now queued
            with lock.read():
                assert not writer_done.is_set()

        thread.join(timeout=5)
        assert writer_done.is_set()

    def test_read_to_write_upgrade_rejected(self) -> None:
        """Read-to-write upgrade raises RuntimeError."""
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError, match="upgrade"):
            with lock.write():
                pass

    def test_write_reentry_rejected(self) -> None:
        """Nested write locks raise RuntimeError."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="not reentrant"):
            with lock.write():
                pass

    def test_read_while_writing_rejected(self) -> None:
        """Write-to-read downgrade raises RuntimeError."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="while holding write lock"):
            with lock.read():
                pass

    def test_lock_usable_after_rejection(self) -> None:
        """A rejected acquisition leaves the lock consistent."""
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError):
            with lock.write():
                pass
        with lock.write():
            assert lock.writer_active
