import time

import pytest
from PySide6.QtCore import QCoreApplication, Qt, QThread

from musicdeck.application.library_manager import LibraryService
from musicdeck.domain.models import LibraryScanResult
from musicdeck.ui.utils.workers import (
    FolderScanWorker,
    LibraryScanWorker,
    cleanup_thread,
    start_worker,
)


@pytest.fixture(scope="session")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def signals():
    received = {"finished": [], "error": [], "progress": []}
    return received


def connect(worker, received):
    worker.finished.connect(received["finished"].append)
    worker.error.connect(received["error"].append)
    worker.progress.connect(lambda *args: received["progress"].append(args))


def test_folder_scan_finished(qapp, music_tree, signals):
    worker = FolderScanWorker(str(music_tree))
    connect(worker, signals)
    worker.run()

    assert signals["error"] == []
    [files] = signals["finished"]
    assert {f.name for f in files} == {"song.mp3", "track.flac"}


def test_folder_scan_error(qapp, tmp_path, signals):
    missing = str(tmp_path / "missing")
    worker = FolderScanWorker(missing)
    connect(worker, signals)
    worker.run()

    assert signals["finished"] == []
    assert signals["error"] == [f"Folder does not exist: {missing}"]


def test_library_scan_progress(qapp, config, music_tree, tmp_path, signals):
    service = LibraryService(config)
    service.add_folder(str(music_tree))
    config.set("library.paths", service.get_folders() + [str(tmp_path / "gone")], save=False)

    worker = LibraryScanWorker(service)
    connect(worker, signals)
    worker.run()

    [result] = signals["finished"]
    assert isinstance(result, LibraryScanResult)
    assert result.total_count == 2
    assert [s.exists for s in result.folders] == [True, False]
    assert signals["progress"] == [
        (1, 2, str(music_tree)),
        (2, 2, str(tmp_path / "gone")),
    ]


def test_cancelled_library_scan_emits_nothing(qapp, config, music_tree, signals):
    service = LibraryService(config)
    service.add_folder(str(music_tree))

    worker = LibraryScanWorker(service)
    connect(worker, signals)
    worker.cancel()
    worker.run()

    assert signals == {"finished": [], "error": [], "progress": []}


def wait_for_thread(thread, timeout=10.0):
    """Pump the main event loop until thread has stopped."""
    deadline = time.monotonic() + timeout
    while not thread.isFinished() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        thread.wait(20)
    # deliver signals queued from the worker thread
    QCoreApplication.processEvents()


def test_start_worker_runs_off_main_thread(qapp, music_tree, signals):
    worker = FolderScanWorker(str(music_tree))
    connect(worker, signals)
    threads = []
    worker.finished.connect(
        lambda _: threads.append(QThread.currentThread()), Qt.ConnectionType.DirectConnection
    )

    thread = start_worker(worker)
    wait_for_thread(thread)

    assert thread.isFinished()
    assert signals["error"] == []
    [files] = signals["finished"]
    assert {f.name for f in files} == {"song.mp3", "track.flac"}
    assert threads == [thread]
    assert worker.thread() == thread


def test_start_worker_quits_on_error(qapp, tmp_path, signals):
    worker = FolderScanWorker(str(tmp_path / "missing"))
    connect(worker, signals)

    thread = start_worker(worker)
    wait_for_thread(thread)

    assert thread.isFinished()
    assert signals["finished"] == []
    assert len(signals["error"]) == 1


def test_cleanup_thread_stops_running_thread(qapp, tmp_path):
    worker = FolderScanWorker(str(tmp_path))
    thread = QThread()
    thread.start()
    assert thread.isRunning()

    cleanup_thread(thread, worker, timeout_ms=5000)

    assert worker.is_cancelled
    assert thread.isFinished()


def test_cleanup_thread_without_thread(qapp, tmp_path):
    worker = FolderScanWorker(str(tmp_path))
    cleanup_thread(None, worker)
    assert worker.is_cancelled
