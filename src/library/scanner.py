# src/library/scanner.py
from PySide6.QtCore import QThread, Signal

from library.scan_library import iter_audio_paths, track_record_from_path

class LibraryScanner(QThread):
    """
    Reads tags off the worker thread. Only plain records cross back through
    records_ready; turning them into tracks and publishing them into the
    library happens on the thread that owns the LibraryStore.
    """
    progress_signal = Signal(int, int)     # scanned, total
    records_ready = Signal(list)           # list[dict]
    finished_signal = Signal(bool, str)    # ok, message

    def __init__(self, directories: list[str], batch_size: int = 100):
        super().__init__()
        self.directories = directories
        self.batch_size = batch_size

    def run(self):
        try:
            paths = iter_audio_paths(self.directories)
            total = len(paths)
            scanned = 0
            found = 0

            batch = []
            for p in paths:
                if self.isInterruptionRequested():
                    break
                record = track_record_from_path(p)
                scanned += 1

                if record is not None:
                    batch.append(record)

                if len(batch) >= self.batch_size:
                    found += len(batch)
                    self.records_ready.emit(batch)
                    batch = []
                    self.progress_signal.emit(scanned, total)

            if batch:
                found += len(batch)
                self.records_ready.emit(batch)

            self.progress_signal.emit(scanned, total)
            self.finished_signal.emit(True, f"Library scanning complete! {found} tracks found.")
        except Exception as e:
            self.finished_signal.emit(False, f"Scan failed: {e}")
