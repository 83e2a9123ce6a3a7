"""
Unit tests for ShutdownHooks.

SIGUSR1 stands in for SIGINT/SIGTERM so the test runner's own handlers are
left alone; the handler itself is invoked directly.
"""

import signal
import threading
from unittest.mock import MagicMock

import pytest

from filehash.services.interrupt import ShutdownHooks


@pytest.fixture
def hooks():
    logger = MagicMock()
    registry = ShutdownHooks(signals=(signal.SIGUSR1,), logger=logger)
    yield registry
    registry.restore()


class TestRegistration:
    """Tests for add/remove and handler installation."""

    def test_add_installs_handler(self, hooks):
        original = signal.getsignal(signal.SIGUSR1)
        hooks.add("cleanup", lambda: None)

        assert hooks.installed
        assert signal.getsignal(signal.SIGUSR1) == hooks._handle_signal

        hooks.restore()
        assert not hooks.installed
        assert signal.getsignal(signal.SIGUSR1) == original

    def test_add_replaces_same_name(self, hooks):
        calls = []
        hooks.add("a", lambda: calls.append("first"))
        hooks.add("a", lambda: calls.append("second"))

        hooks.run_hooks()

        assert hooks.names() == ["a"]
        assert calls == ["second"]

    def test_remove(self, hooks):
        hooks.add("a", lambda: None)
        hooks.add("b", lambda: None)
        hooks.remove("a")
        hooks.remove("never-added")
        assert hooks.names() == ["b"]


class TestRunHooks:
    """Tests for running hooks."""

    def test_runs_in_order_once(self, hooks):
        calls = []
        hooks.add("first", lambda: calls.append(1))
        hooks.add("second", lambda: calls.append(2))

        hooks.run_hooks()
        hooks.run_hooks()

        assert calls == [1, 2]

    def test_failing_hook_does_not_stop_others(self, hooks):
        calls = []

        def broken():
            raise RuntimeError("boom")

        hooks.add("broken", broken)
        hooks.add("after", lambda: calls.append("after"))

        hooks.run_hooks()

        assert calls == ["after"]
        hooks._logger.error.assert_called_once()


class TestWorkerThreads:
    """Hooks added off the main thread."""

    def test_add_from_worker_thread_defers_install(self, hooks):
        errors = []

        def worker():
            try:
                hooks.add("from-worker", lambda: None)
            except Exception as e:
                errors.append(e)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert errors == []
        assert hooks.names() == ["from-worker"]
        assert not hooks.installed

        hooks.add("from-main", lambda: None)
        assert hooks.installed
        assert signal.getsignal(signal.SIGUSR1) == hooks._handle_signal


class TestSignalHandling:
    """Tests for the installed signal handler."""

    def test_handler_runs_hooks_and_exits(self, hooks):
        calls = []
        hooks.add("report", lambda: calls.append("report"))

        with pytest.raises(SystemExit) as exc_info:
            hooks._handle_signal(signal.SIGUSR1, None)

        assert exc_info.value.code == 1
        assert calls == ["report"]
        hooks._logger.warning.assert_called_once()

    def test_custom_exit_code(self):
        hooks = ShutdownHooks(signals=(signal.SIGUSR1,), exit_code=130, logger=MagicMock())
        with pytest.raises(SystemExit) as exc_info:
            hooks._handle_signal(signal.SIGUSR1, None)
        assert exc_info.value.code == 130
