"""
Background worker utilities for Qt threading.
Runs library scans on a QThread so the GUI stays responsive.
"""

import logging
from typing import Optional

from PySide6.QtCore import QThread, QObject, Signal

from musicdeck.application.library_manager import LibraryService, ScanOptions, scan_music_folder
from musicdeck.domain.exceptions import FolderScanError

logger = logging.getLogger(__name__)


class BaseWorker(QObject):
    """
    Base class for background workers.
    Provides common signals and cancellation support.

    Signals:
        finished: Emitted when work is completed successfully
        error: Emitted when an error occurs (with error message)
        progress: Emitted to report progress (current, total, message)
    """

    finished = Signal(object)  # Result data
    error = Signal(str)  # Error message
    progress = Signal(int, int, str)  # current, total, message

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._cancelled = False

    def cancel(self) -> None:
        """Request cancellation of the work."""
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation was requested."""
        return self._cancelled

    def run(self) -> None:
        """
        Override this method to implement the actual work.
        Check self.is_cancelled periodically and return early if True.
        """
        raise NotImplementedError("Subclasses must implement run()")


def start_worker(worker: BaseWorker) -> QThread:
    """
    Move a worker to a new QThread and start it.

    The thread quits once the worker emits finished or error.

    Returns:
        QThread: The running thread; keep a reference until it finishes
    """
    thread = QThread()
    worker.moveToThread(thread)
    thread.started.connect(worker.run)
    worker.finished.connect(thread.quit)
    worker.error.connect(thread.quit)
    thread.start()
    return thread


def cleanup_thread(
    thread: Optional[QThread],
    worker: Optional[QObject] = None,
    timeout_ms: int = 5000
) -> None:
    """
    Safely cleanup a QThread and its worker.

    Args:
        thread: The QThread to cleanup
        worker: Optional worker; cancelled first if it supports it
        timeout_ms: Timeout in milliseconds to wait for thread to finish
    """
    if isinstance(worker, BaseWorker):
        worker.cancel()

    if thread is None:
        return

    try:
        if thread.isRunning():
            thread.quit()
            if not thread.wait(timeout_ms):
                logger.warning(f"Thread did not finish within {timeout_ms}ms, forcing termination")
                thread.terminate()
                thread.wait()
    except RuntimeError:
        # Thread already deleted
        pass


class FolderScanWorker(BaseWorker):
    """
    Worker for scanning a single folder.
    Emits the MusicFile list, or the scanner's error text.
    """

    def __init__(
        self,
        folder_path: str,
        options: Optional[ScanOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._folder_path = folder_path
        self._options = options

    def run(self) -> None:
        try:
            files = scan_music_folder(self._folder_path, self._options)
        except FolderScanError as e:
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.error(f"Folder scan failed: {e}", exc_info=True)
            self.error.emit(str(e))
            return

        if self.is_cancelled:
            return
        self.finished.emit(files)


class LibraryScanWorker(BaseWorker):
    """
    Worker for rescanning every library folder.
    Reports progress per folder; cancellation takes effect between folders.
    """

    def __init__(self, service: LibraryService, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._service = service

    def run(self) -> None:
        try:
            result = self._service.scan_all_folders(
                progress_callback=self.progress.emit,
                should_stop=lambda: self.is_cancelled,
            )
        except Exception as e:
            logger.error(f"Library scan failed: {e}", exc_info=True)
            self.error.emit(str(e))
            return

        if self.is_cancelled:
            return
        self.finished.emit(result)
