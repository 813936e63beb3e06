"""Tests for CaughtException."""

import os
from traceback import StackSummary

import pytest

import catching
from catching import CaughtException, init


def capture_here():
    return CaughtException(ValueError('bad input'))


class TestCaughtExceptionCreation:
    """Tests for CaughtException construction and trace capture."""

    def test_wraps_error(self):
        """The error is stored as given."""
        exc = ValueError('bad input')
        assert CaughtException(exc).error is exc

    def test_accepts_non_exception_error(self):
        """Arbitrary objects can be captured."""
        assert CaughtException('error').error == 'error'

    def test_captures_trace_when_omitted(self):
        """Without a trace, the caller's stack is captured."""
        caught = capture_here()
        assert isinstance(caught.stack_trace, StackSummary)
        assert caught.stack_trace[-1].name == 'capture_here'
        assert caught.stack_trace[-2].name == 'test_captures_trace_when_omitted'

    def test_trace_excludes_library_frames(self):
        """Frames inside the library are not part of the captured trace."""
        caught = capture_here()
        package_dir = os.path.dirname(os.path.abspath(catching.__file__))
        assert not any(os.path.abspath(f.filename).startswith(package_dir) for f in caught.stack_trace)

    def test_keeps_explicit_trace(self):
        """An explicit trace is used unchanged."""
        trace = StackSummary.from_list([('worker.py', 10, 'run', 'step()')])
        assert CaughtException('error', trace).stack_trace is trace

    def test_is_frozen(self):
        """CaughtException instances are immutable."""
        caught = CaughtException('error')
        with pytest.raises(AttributeError):
            caught.error = 'other'  # type: ignore[misc]


class TestCaughtExceptionRendering:
    """Tests for describe(), format() and str()."""

    def test_describe_exception(self):
        """Exceptions are described with their type and message."""
        assert CaughtException(ValueError('bad input')).describe() == 'ValueError: bad input'

    def test_describe_plain_error(self):
        """Plain objects are described with str()."""
        assert CaughtException(404).describe() == '404'

    def test_str_is_message_then_trace(self):
        """str() puts the message on the first line and the trace after it."""
        caught = capture_here()
        lines = str(caught).splitlines()
        assert lines[0] == 'ValueError: bad input'
        assert any('in capture_here' in line for line in lines[1:])

    def test_format_matches_str(self):
        """format() is the line-by-line form of str()."""
        caught = capture_here()
        assert ''.join(caught.format()).rstrip('\n') == str(caught)

    def test_str_without_trace(self):
        """An empty trace renders only the message."""
        caught = CaughtException('error', StackSummary())
        assert str(caught) == 'error'


@pytest.mark.usefixtures('fresh_config')
class TestCaughtExceptionConfig:
    """Tests for trace capture settings."""

    def test_capture_disabled(self):
        """capture_trace=False yields an empty trace."""
        init(capture_trace=False)
        caught = capture_here()
        assert len(caught.stack_trace) == 0
        assert str(caught) == 'ValueError: bad input'

    def test_trace_limit_keeps_most_recent_frames(self):
        """trace_limit truncates to the innermost frames."""
        init(trace_limit=1)
        caught = capture_here()
        assert len(caught.stack_trace) == 1
        assert caught.stack_trace[0].name == 'capture_here'
