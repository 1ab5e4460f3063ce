"""Tests for core/depth_guard.py and the guarded() combinator.

Tests DepthGuard context manager, depth_clamp(), and guarded() with
Hypothesis for property-based testing.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
import threading

import pytest
from hypothesis import event, example, given, settings
from hypothesis import strategies as st

from parsekit.constants import FRAMES_PER_LEVEL, MAX_DEPTH, RESERVE_FRAMES
from parsekit.core import (
    DepthGuard,
    Failure,
    Parser,
    Success,
    depth_clamp,
    guarded,
    lazy,
    map_,
    one_of,
    sequence,
    succeed,
)
from parsekit.diagnostics import DepthLimitExceededError, DiagnosticCode, ParsekitError
from parsekit.text import Cursor, exact_match

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard uses MAX_DEPTH by default."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0

    def test_custom_max_depth(self) -> None:
        """DepthGuard accepts custom max_depth."""
        guard = DepthGuard(max_depth=50)

        assert guard.max_depth == 50
        assert guard.current_depth == 0

    def test_max_depth_constant(self) -> None:
        """MAX_DEPTH is set to 64."""
        assert MAX_DEPTH == 64

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against recursion limit."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit + 1000)

        assert guard.max_depth == limit - 50
        assert guard.max_depth < limit


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_context_manager_increments_depth(self) -> None:
        """Entering context increments depth."""
        guard = DepthGuard()

        with guard:
            assert guard.current_depth == 1

        assert guard.current_depth == 0

    def test_context_manager_nested(self) -> None:
        """Nested contexts track cumulative depth."""
        guard = DepthGuard(max_depth=5)

        with guard:
            with guard:
                with guard:
                    assert guard.current_depth == 3
                assert guard.current_depth == 2
            assert guard.current_depth == 1

    def test_context_manager_returns_self(self) -> None:
        """__enter__ returns the guard."""
        guard = DepthGuard()

        with guard as entered:
            assert entered is guard

    def test_raises_on_exceeded(self) -> None:
        """Entering beyond max_depth raises DepthLimitExceededError."""
        guard = DepthGuard(max_depth=2)

        with guard, guard:
            with pytest.raises(DepthLimitExceededError), guard:
                pass
            assert guard.current_depth == 2

    def test_state_not_corrupted_on_enter_failure(self) -> None:
        """A refused __enter__ does not change current_depth."""
        guard = DepthGuard(max_depth=1)

        with guard:
            for _ in range(3):
                with pytest.raises(DepthLimitExceededError), guard:
                    pass
            assert guard.current_depth == 1

        assert guard.current_depth == 0

    def test_is_exceeded(self) -> None:
        """is_exceeded reports whether the next entry would be refused."""
        guard = DepthGuard(max_depth=1)

        assert not guard.is_exceeded()
        with guard:
            assert guard.is_exceeded()
        assert not guard.is_exceeded()


class TestDepthGuardError:
    """Test the exception raised by DepthGuard."""

    def test_error_is_parsekit_error(self) -> None:
        """DepthLimitExceededError belongs to the parsekit hierarchy."""
        guard = DepthGuard(max_depth=0)

        with pytest.raises(ParsekitError), guard:
            pass

    def test_error_carries_diagnostic(self) -> None:
        """The error has a MAX_DEPTH_EXCEEDED diagnostic naming the limit."""
        guard = DepthGuard(max_depth=3)
        guard.current_depth = 3

        with pytest.raises(DepthLimitExceededError) as exc_info, guard:
            pass

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert "(3)" in diagnostic.message


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Test depth_clamp against the interpreter recursion limit."""

    def test_returns_value_within_limit(self) -> None:
        """Values under the limit pass through."""
        assert depth_clamp(10) == 10

    def test_clamps_excessive_depth(self) -> None:
        """Values over the limit are clamped."""
        limit = sys.getrecursionlimit()

        assert depth_clamp(limit * 2) == limit - 50

    def test_custom_reserve_frames(self) -> None:
        """reserve_frames widens or narrows the margin."""
        limit = sys.getrecursionlimit()

        assert depth_clamp(limit * 2, reserve_frames=200) == limit - 200

    def test_frames_per_level_divides_budget(self) -> None:
        """The frame budget is shared out between nesting levels."""
        limit = sys.getrecursionlimit()

        assert depth_clamp(limit * 2, frames_per_level=10) == (limit - 50) // 10
        assert depth_clamp(5, frames_per_level=10) == 5

    def test_logs_warning_on_clamp(self, caplog: pytest.LogCaptureFixture) -> None:
        """Clamping is logged at WARNING."""
        with caplog.at_level(logging.WARNING, logger="parsekit.core.depth_guard"):
            depth_clamp(sys.getrecursionlimit() * 2)

        assert any("Clamping" in record.message for record in caplog.records)

    def test_no_warning_within_limit(self, caplog: pytest.LogCaptureFixture) -> None:
        """Nothing is logged when no clamping is needed."""
        with caplog.at_level(logging.WARNING, logger="parsekit.core.depth_guard"):
            depth_clamp(10)

        assert not any("Clamping" in record.message for record in caplog.records)


# ============================================================================
# guarded()
# ============================================================================


def _parens(max_depth: int) -> Parser[Cursor, int]:
    """Balanced parentheses, returning the nesting depth."""
    nested: Parser[Cursor, int] = guarded(
        one_of(
            map_(
                sequence(exact_match("("), lazy(lambda: nested), exact_match(")")),
                lambda values: values[1] + 1,
            ),
            succeed(0),
        ),
        max_depth,
    )
    return nested


class TestGuarded:
    """Test the guarded() combinator."""

    def test_within_limit_succeeds(self) -> None:
        """Nesting below the limit parses normally."""
        outcome = _parens(10)(Cursor("((()))"))

        assert isinstance(outcome, Success)
        assert outcome.value == 3

    def test_exact_limit(self) -> None:
        """max_depth active invocations are allowed."""
        depth = 5
        source = "(" * (depth - 1) + ")" * (depth - 1)

        outcome = _parens(depth)(Cursor(source))

        assert isinstance(outcome, Success)
        assert outcome.value == depth - 1

    def test_refuses_past_limit(self) -> None:
        """Entry past the limit is a Failure at location 0, not an exception."""
        guarded_fail = guarded(succeed(1), 0)
        cursor = Cursor("x")

        assert guarded_fail(cursor) == Failure(cursor, 0)

    def test_deep_input_fails_without_recursion_error(self) -> None:
        """Very deep nesting is reported as a parse failure."""
        source = "(" * 2000 + ")" * 2000

        outcome = sequence(_parens(20), exact_match(")"))(Cursor(source))

        assert isinstance(outcome, Failure)

    def test_depth_released_after_failure(self) -> None:
        """A refused parse leaves the guard reusable."""
        parser = _parens(3)
        parser(Cursor("(((((())))))"))

        outcome = parser(Cursor("(())"))

        assert isinstance(outcome, Success)
        assert outcome.value == 2

    def test_depth_tracked_per_thread(self) -> None:
        """Each thread has its own depth counter."""
        parser = _parens(8)
        results: list[object] = []

        def work() -> None:
            results.append(parser(Cursor("((((()))))")))

        threads = [threading.Thread(target=work) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [Success(Cursor("((((()))))", 10), 5)] * 4

    def test_logs_when_limit_reached(self, caplog: pytest.LogCaptureFixture) -> None:
        """Refusals are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="parsekit.core.combinators"):
            guarded(succeed(1), 0)(Cursor(""))

        assert any("depth limit" in record.message for record in caplog.records)

    def test_large_max_depth_is_clamped(self) -> None:
        """A limit too large for the stack is lowered rather than trusted."""
        source = "(" * 2000 + ")" * 2000

        outcome = sequence(_parens(100_000), exact_match(")"))(Cursor(source))

        assert isinstance(outcome, Failure)

    def test_clamped_limit_uses_frames_per_level(self) -> None:
        """Nesting up to the clamped limit still parses."""
        limit = (sys.getrecursionlimit() - RESERVE_FRAMES) // FRAMES_PER_LEVEL
        depth = min(limit, 20)
        source = "(" * (depth - 1) + ")" * (depth - 1)

        outcome = _parens(100_000)(Cursor(source))

        assert isinstance(outcome, Success)
        assert outcome.value == depth - 1

    def test_recursion_error_becomes_failure(self) -> None:
        """Stack exhaustion inside the wrapped parser is a Failure at 0."""

        def exhausted(inp: Cursor) -> Success[Cursor, int]:
            raise RecursionError

        cursor = Cursor("(")

        assert guarded(exhausted, 10)(cursor) == Failure(cursor, 0)

    def test_guard_released_after_recursion_error(self) -> None:
        """The depth counter unwinds when the stack runs out."""
        calls: list[int] = []

        def exhausted_once(inp: Cursor) -> Success[Cursor, int]:
            calls.append(1)
            if len(calls) == 1:
                raise RecursionError
            return Success(inp, len(calls))

        parser = guarded(exhausted_once, 1)
        cursor = Cursor("")

        assert parser(cursor) == Failure(cursor, 0)
        assert parser(cursor) == Success(cursor, 2)


# ============================================================================
# Property-Based Tests
# ============================================================================


@given(max_depth=st.integers(min_value=1, max_value=100))
def test_property_context_manager_enforces_limit(max_depth: int) -> None:
    """Property: context manager enforces max_depth limit exactly.

    For any max_depth in [1, 100]:
    - Nesting max_depth times succeeds
    - Nesting max_depth + 1 times raises DepthLimitExceededError
    """
    event(f"max_depth={max_depth}")
    guard = DepthGuard(max_depth=max_depth)

    def nest(remaining: int) -> None:
        if remaining == 0:
            return
        with guard:
            nest(remaining - 1)

    nest(max_depth)
    assert guard.current_depth == 0

    with pytest.raises(DepthLimitExceededError):
        nest(max_depth + 1)
    assert guard.current_depth == 0


@given(
    requested=st.integers(min_value=1, max_value=100000),
    reserve=st.integers(min_value=10, max_value=200),
)
@example(requested=50, reserve=50)
@example(requested=99999, reserve=50)
def test_property_depth_clamp_never_exceeds_limit(requested: int, reserve: int) -> None:
    """Property: result + reserve <= recursion_limit and result <= requested."""
    event(f"requested={'within' if requested < 1000 else 'excessive'}")

    result = depth_clamp(requested, reserve_frames=reserve)

    assert result + reserve <= sys.getrecursionlimit()
    assert result <= requested


@given(
    max_depth=st.integers(min_value=1, max_value=30),
    nesting=st.integers(min_value=0, max_value=40),
)
@settings(max_examples=200)
def test_property_guarded_accepts_exactly_up_to_limit(max_depth: int, nesting: int) -> None:
    """Property: n parentheses parse fully iff n < max_depth."""
    event(f"within_limit={nesting < max_depth}")
    source = "(" * nesting + ")" * nesting

    outcome = _parens(max_depth)(Cursor(source))

    assert isinstance(outcome, Success)
    if nesting < max_depth:
        assert outcome.value == nesting
        assert outcome.remaining.is_eof
    else:
        assert outcome.value == 0
        assert outcome.remaining.pos == 0
