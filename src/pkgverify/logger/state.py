"""Logger state management module.

Holds the process-wide logger state singleton. A single root logger
instance must exist for the whole application, so this state is the one
deliberate module-level singleton in pkgverify.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state.

    Attributes:
        lock: Thread lock for singleton initialization
        root_initialized: Whether root logger has been set up
        config_applied: Whether settings file levels have been applied
        queue_listener: Background thread processing log records
        log_queue: Queue for async-safe log record processing

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.config_applied = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Get the global logger state singleton.

    Returns:
        The global logger state instance

    """
    return _state
