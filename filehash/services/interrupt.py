"""
Shutdown hooks run when the process receives SIGINT or SIGTERM.

Callbacks are registered by name; the signal handlers are installed the
first time a hook is added. On a signal every hook runs once, in
registration order, and the process exits.
"""

import signal
import sys
import threading
from collections.abc import Callable

from ..core.interfaces.logger import ILogger

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ShutdownHooks:
    """
    Named registry of no-argument callbacks run on interrupt/termination.

    Instance state rather than module globals, so tests and embedders can
    own their own registry.
    """

    def __init__(
        self,
        signals: tuple[int, ...] = DEFAULT_SIGNALS,
        exit_code: int = 1,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the hook registry.

        Args:
            signals: Signals that trigger the hooks
            exit_code: Process exit status after the hooks ran
            logger: Logger for internal diagnostics
        """
        self._signals = signals
        self._exit_code = exit_code
        self._hooks: dict[str, Callable[[], None]] = {}
        self._lock = threading.RLock()
        self._original_handlers: dict[int, object] = {}
        self._installed = False
        self._fired = False
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ..core.di import get_logger

            self._logger = get_logger()
        return self._logger

    @property
    def installed(self) -> bool:
        return self._installed

    def add(self, name: str, function: Callable[[], None]) -> None:
        """
        Register (or replace) a hook, installing signal handlers on first use.

        Python only lets the main thread set signal handlers. Hooks added
        from other threads are recorded, and the handlers are installed by
        the next add() or install() made on the main thread.
        """
        with self._lock:
            if not self._installed:
                if threading.current_thread() is threading.main_thread():
                    self.install()
                else:
                    self.logger.debug("Hook %s added off the main thread; handlers deferred", name)
            self._hooks[name] = function
            self.logger.debug("Shutdown hook registered: %s", name)

    def remove(self, name: str) -> None:
        """Unregister a hook; unknown names are ignored."""
        with self._lock:
            if self._hooks.pop(name, None) is not None:
                self.logger.debug("Shutdown hook removed: %s", name)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._hooks)

    def install(self) -> None:
        """Install signal handlers, saving the ones they replace."""
        with self._lock:
            if self._installed:
                return
            for signum in self._signals:
                self._original_handlers[signum] = signal.signal(signum, self._handle_signal)
            self._installed = True
            self.logger.debug("Shutdown handlers installed for %s", list(self._signals))

    def restore(self) -> None:
        """Restore the signal handlers that were active before install()."""
        with self._lock:
            for signum, handler in self._original_handlers.items():
                signal.signal(signum, handler)  # type: ignore[arg-type]
            self._original_handlers.clear()
            self._installed = False

    def run_hooks(self) -> None:
        """Run every registered hook once, in registration order."""
        with self._lock:
            if self._fired:
                return
            self._fired = True
            hooks = list(self._hooks.items())
        for name, function in hooks:
            try:
                function()
            except Exception as e:
                self.logger.error("Shutdown hook %s failed: %s", name, e)

    def _handle_signal(self, signum: int, frame) -> None:
        """Run hooks and exit."""
        self.logger.warning("Received signal %s, exiting...", signal.Signals(signum).name)
        self.run_hooks()
        sys.exit(self._exit_code)
