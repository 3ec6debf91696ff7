import threading
import time

from vcutil.locks import Locker, RWLocker


def test_do_returns_result():
    assert Locker().do(lambda: "value") == "value"


def test_do_is_mutually_exclusive():
    locker = Locker()
    state = {"n": 0}

    def bump():
        current = state["n"]
        time.sleep(0.001)
        state["n"] = current + 1

    threads = [threading.Thread(target=locker.do, args=(bump,)) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert locker.do(lambda: state["n"]) == len(threads)


def test_readers_run_concurrently():
    rw = RWLocker()
    barrier = threading.Barrier(2, timeout=2)
    results = []
    errors = []

    def reader():
        try:
            results.append(rw.read(barrier.wait))
        except threading.BrokenBarrierError as exc:
            errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert errors == []
    # Both readers held the lock at once; a writer must still get in afterwards.
    assert rw.write(lambda: sorted(results)) == [0, 1]


def test_writer_excludes_readers():
    rw = RWLocker()
    inside = threading.Event()
    release = threading.Event()
    entered = threading.Event()
    results = []

    def hold():
        inside.set()
        release.wait(2)
        return "written"

    def mark():
        entered.set()
        return "read"

    writer = threading.Thread(target=lambda: results.append(rw.write(hold)))
    writer.start()
    assert inside.wait(2)
    reader = threading.Thread(target=lambda: results.append(rw.read(mark)))
    reader.start()
    assert not entered.wait(0.1)
    release.set()
    assert entered.wait(2)
    writer.join()
    reader.join()
    assert rw.read(lambda: list(results)) == ["written", "read"]


def test_read_and_write_return_results():
    rw = RWLocker()
    assert rw.read(lambda: 1) == 1
    assert rw.write(lambda: "w") == "w"