"""
File System Watcher Service for the config comparator.

Uses watchdog to monitor a source/target pair of configuration files
and re-run the comparison whenever either of them changes.
"""
import os
import time
import logging
from pathlib import Path
from typing import Callable, Optional
from datetime import datetime

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent

from core import ComparisonResult, ConfigComparatorError
from services.files import read_and_compare

logger = logging.getLogger(__name__)


class PairChangeHandler(FileSystemEventHandler):
    """
    Handles file system events for a watched pair of config files.

    Events for any other file in the watched directories are ignored.
    """

    def __init__(
        self,
        watched_paths: set[str],
        on_change: Callable[[], None],
        debounce_seconds: float = 0.5
    ):
        """
        Initialize handler.

        Args:
            watched_paths: Absolute paths of the files to react to
            on_change: Called when one of the files changed
            debounce_seconds: Delay so editors finish writing first
        """
        self.watched_paths = {os.path.abspath(p) for p in watched_paths}
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._last_signature: Optional[tuple] = None

    def on_created(self, event: FileSystemEvent):
        self._handle(event, event.src_path)

    def on_modified(self, event: FileSystemEvent):
        self._handle(event, event.src_path)

    def on_moved(self, event: FileSystemEvent):
        """Editors that save via rename-over show up as moves."""
        self._handle(event, event.dest_path)

    def _handle(self, event: FileSystemEvent, path):
        if event.is_directory:
            return

        if isinstance(path, bytes):
            path = os.fsdecode(path)
        if os.path.abspath(path) not in self.watched_paths:
            return

        if self.debounce_seconds:
            time.sleep(self.debounce_seconds)

        # Skip duplicate events for content we already compared
        signature = self._mtime_signature()
        if signature is not None and signature == self._last_signature:
            return
        self._last_signature = signature

        logger.info(f"Change detected: {path}")
        self.on_change()

    def _mtime_signature(self) -> Optional[tuple]:
        try:
            return tuple(os.path.getmtime(p) for p in sorted(self.watched_paths))
        except OSError:
            return None


class ComparisonWatcher:
    """
    Watches two configuration files and re-compares them on change.

    Usage:
        watcher = ComparisonWatcher("uat.yaml", "prod.yaml", on_result)
        watcher.start()
        # ... later
        watcher.stop()
    """

    def __init__(
        self,
        source_path: str,
        target_path: str,
        on_result: Callable[[ComparisonResult], None],
        on_error: Optional[Callable[[ConfigComparatorError], None]] = None,
        separator: str = ".",
        debounce_seconds: float = 0.5
    ):
        self.source_path = Path(source_path).absolute()
        self.target_path = Path(target_path).absolute()
        self.on_result = on_result
        self.on_error = on_error
        self.separator = separator
        self.debounce_seconds = debounce_seconds

        self._observer: Optional[Observer] = None
        self._handler: Optional[PairChangeHandler] = None
        self._running = False
        self._stats = {
            "comparisons": 0,
            "errors": 0,
            "last_run": None,
            "started_at": None
        }

    def run_once(self) -> Optional[ComparisonResult]:
        """
        Compare the pair now and dispatch to the callbacks.

        Comparison errors go to on_error (or are logged) rather than
        stopping the watcher, since the user is likely mid-edit.
        """
        self._stats["last_run"] = datetime.now().isoformat()
        try:
            result = read_and_compare(str(self.source_path), str(self.target_path), self.separator)
        except ConfigComparatorError as e:
            self._stats["errors"] += 1
            logger.warning(f"Comparison failed: {e}")
            if self.on_error:
                self.on_error(e)
            return None

        self._stats["comparisons"] += 1
        self.on_result(result)
        return result

    def start(self):
        """Start watching both files."""
        if self._running:
            logger.warning("Watcher already running")
            return

        for path in (self.source_path, self.target_path):
            if not path.exists():
                logger.error(f"Watch path does not exist: {path}")
                raise FileNotFoundError(f"Watch path not found: {path}")

        logger.info(f"Starting comparison watcher on: {self.source_path} <-> {self.target_path}")

        self._handler = PairChangeHandler(
            {str(self.source_path), str(self.target_path)},
            self.run_once,
            debounce_seconds=self.debounce_seconds
        )
        self._observer = Observer()
        for directory in sorted({str(self.source_path.parent), str(self.target_path.parent)}):
            self._observer.schedule(self._handler, directory, recursive=False)
        self._observer.start()
        self._running = True
        self._stats["started_at"] = datetime.now().isoformat()

        logger.info("Comparison watcher started")

    def stop(self):
        """Stop watching."""
        if not self._running:
            return

        logger.info("Stopping comparison watcher")

        if self._observer:
            self._observer.stop()
            self._observer.join(timeout=5)
            self._observer = None

        self._handler = None
        self._running = False

        logger.info("Comparison watcher stopped")

    def is_running(self) -> bool:
        """Check if watcher is running."""
        return self._running

    def get_stats(self) -> dict:
        """Get watcher statistics."""
        return {
            **self._stats,
            "is_running": self._running
        }
