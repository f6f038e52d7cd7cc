"""
Forwarding of svg_tiler log records to the main window's status bar.

Records may be emitted on the export worker thread, so they are pushed
onto a queue and drained by a QTimer on the GUI thread.
"""
from __future__ import annotations

import logging
from queue import Empty, Queue
from typing import List, Optional, Tuple

# (message, level name) pairs as stored on the queue
StatusEntry = Tuple[str, str]


class QueueLogHandler(logging.Handler):
    """
    Puts ``(message, level)`` pairs on a queue for the status bar.

    Only the bare message is kept; the status bar has no room for
    timestamps or logger names. DEBUG entries are reported as INFO.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = "INFO" if record.levelno <= logging.DEBUG else record.levelname
            self.log_queue.put((self.format(record), level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = None) -> QueueLogHandler:
    """
    Start forwarding ``logger_name`` records (root if None) to ``log_queue``.

    Returns:
        The handler, to pass to detach_queue_handler() when the window closes.
    """
    handler = QueueLogHandler(log_queue)
    logging.getLogger(logger_name).addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = None) -> None:
    """Stop forwarding records from ``logger_name`` through ``handler``."""
    logging.getLogger(logger_name).removeHandler(handler)


def drain_queue(log_queue: Queue) -> List[StatusEntry]:
    """Pop every pending entry without blocking, oldest first."""
    items: List[StatusEntry] = []
    while True:
        try:
            items.append(log_queue.get_nowait())
        except Empty:
            return items
