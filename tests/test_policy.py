"""Tests for the style policy."""

import os
import threading
from io import StringIO
from unittest.mock import patch

from gory import policy as policy_module
from gory.policy import StylePolicy, default_policy, force, is_enabled, tty_attached


class TestTtyAttached:
    def test_false_when_not_tty(self):
        assert tty_attached(StringIO()) is False

    def test_true_when_tty(self):
        stream = StringIO()
        stream.isatty = lambda: True
        assert tty_attached(stream) is True

    def test_stream_without_isatty(self):
        class FakeStream:
            pass

        assert tty_attached(FakeStream()) is False

    def test_closed_stream(self):
        stream = StringIO()
        stream.close()
        assert tty_attached(stream) is False

    def test_defaults_to_stdout(self):
        stream = StringIO()
        stream.isatty = lambda: True
        with patch.object(policy_module.sys, "stdout", stream):
            assert tty_attached() is True

    def test_missing_stdout(self):
        with patch.object(policy_module.sys, "stdout", None):
            assert tty_attached() is False


class TestDetection:
    def test_tty_and_no_env(self, tty_policy):
        assert tty_policy.is_enabled() is True

    def test_no_tty(self, pipe_policy):
        assert pipe_policy.is_enabled() is False

    def test_env_disables(self):
        policy = StylePolicy(probe=lambda: True, environ={"TERM_COLOR": "FALSE"})
        assert policy.is_enabled() is False

    def test_env_zero_disables(self):
        policy = StylePolicy(probe=lambda: True, environ={"TERM_COLOR": "0"})
        assert policy.is_enabled() is False

    def test_env_truthy_keeps_enabled(self):
        policy = StylePolicy(probe=lambda: True, environ={"TERM_COLOR": "anything"})
        assert policy.is_enabled() is True

    def test_env_cannot_enable_without_tty(self):
        policy = StylePolicy(probe=lambda: False, environ={"TERM_COLOR": "1"})
        assert policy.is_enabled() is False

    def test_custom_env_var(self):
        policy = StylePolicy(
            env_var="APP_COLOR", probe=lambda: True,
            environ={"APP_COLOR": "0", "TERM_COLOR": "1"},
        )
        assert policy.is_enabled() is False

    @patch.dict(os.environ, {"TERM_COLOR": "false"})
    def test_reads_process_environment_by_default(self):
        policy = StylePolicy(probe=lambda: True)
        assert policy.is_enabled() is False

    def test_detection_is_cached(self):
        calls = []

        def probe():
            calls.append(1)
            return True

        policy = StylePolicy(probe=probe, environ={})
        assert policy.is_enabled()
        assert policy.is_enabled()
        assert policy.detect()
        assert len(calls) == 1

    def test_cached_value_ignores_later_env_changes(self):
        environ = {}
        policy = StylePolicy(probe=lambda: True, environ=environ)
        assert policy.is_enabled() is True
        environ["TERM_COLOR"] = "0"
        assert policy.is_enabled() is True

    def test_reset_recomputes(self):
        environ = {}
        policy = StylePolicy(probe=lambda: True, environ=environ)
        assert policy.is_enabled() is True
        environ["TERM_COLOR"] = "0"
        policy.reset()
        assert policy.is_enabled() is False

    def test_concurrent_first_use_probes_once(self):
        calls = []
        barrier = threading.Barrier(8)

        def probe():
            calls.append(1)
            return True

        policy = StylePolicy(probe=probe, environ={})
        results = []

        def worker():
            barrier.wait()
            results.append(policy.is_enabled())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [True] * 8
        assert len(calls) == 1


class TestForce:
    def test_force_on_beats_missing_tty(self, pipe_policy):
        pipe_policy.set_force(True)
        assert pipe_policy.is_enabled() is True

    def test_force_off_beats_tty(self, tty_policy):
        tty_policy.set_force(False)
        assert tty_policy.is_enabled() is False

    def test_force_on_beats_env(self):
        policy = StylePolicy(probe=lambda: True, environ={"TERM_COLOR": "0"})
        policy.set_force(True)
        assert policy.is_enabled() is True

    def test_none_restores_detection(self, tty_policy):
        tty_policy.set_force(False)
        tty_policy.set_force(None)
        assert tty_policy.forced is None
        assert tty_policy.is_enabled() is True

    def test_force_is_read_live(self, tty_policy):
        assert tty_policy.is_enabled() is True
        tty_policy.set_force(False)
        assert tty_policy.is_enabled() is False
        tty_policy.set_force(True)
        assert tty_policy.is_enabled() is True

    def test_context_manager_restores_previous(self, pipe_policy):
        pipe_policy.set_force(False)
        with pipe_policy.forcing(True) as p:
            assert p is pipe_policy
            assert pipe_policy.is_enabled() is True
        assert pipe_policy.forced is False

    def test_context_manager_restores_on_error(self, tty_policy):
        try:
            with tty_policy.forcing(False):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert tty_policy.forced is None

    def test_forcing_is_distinct_from_setter(self):
        assert not hasattr(StylePolicy, "force")
        with default_policy().forcing(False):
            assert is_enabled() is False
        assert default_policy().forced is None

    def test_reset_clears_force(self, tty_policy):
        tty_policy.set_force(False)
        tty_policy.reset()
        assert tty_policy.forced is None

    def test_repr(self, tty_policy):
        tty_policy.set_force(True)
        assert repr(tty_policy) == "StylePolicy(env_var='TERM_COLOR', forced=True)"


class TestDefaultPolicy:
    def test_singleton(self):
        assert default_policy() is default_policy()

    def test_module_force(self):
        force(True)
        assert is_enabled() is True
        assert default_policy().forced is True
        force(False)
        assert is_enabled() is False

    def test_module_force_none_restores_detection(self):
        stream = StringIO()
        with patch.object(policy_module.sys, "stdout", stream):
            force(True)
            force(None)
            assert is_enabled() is False
