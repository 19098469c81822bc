"""Tests for SafeInt safe arithmetic wrapper."""

import pytest

from amm_pool.safe_int import (
    UINT256_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint256Overflow,
    Underflow,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_invalid_type_raises(self):
        """SafeInt rejects floats, strings and bools."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt

    def test_zero_constructor(self):
        """SafeInt.zero() wraps 0."""
        assert SafeInt.zero().value == 0


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        """Addition wraps the integer sum."""
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_sub(self):
        """Subtraction wraps the integer difference."""
        assert (S(10) - S(3)).value == 7
        assert (S(5) - S(5)).value == 0

    def test_sub_underflow_raises(self):
        """Subtraction underflow raises Underflow."""
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)

    def test_mul(self):
        """Multiplication wraps the integer product."""
        assert (S(6) * S(7)).value == 42
        assert (6 * S(7)).value == 42

    def test_floordiv_truncates(self):
        """Floor division rounds toward zero for non-negative operands."""
        assert (S(7) // S(3)).value == 2
        assert (S(110000) // S(1100)).value == 100
        assert (S(100000) // S(1100)).value == 90

    def test_floordiv_by_zero_raises(self):
        """Dividing by zero raises DivisionByZero."""
        with pytest.raises(DivisionByZero) as exc_info:
            S(10) // S(0)
        assert "Division by zero" in str(exc_info.value)


class TestSafeIntComparison:
    """Tests for SafeInt comparison operations."""

    def test_eq(self):
        """SafeInt compares equal to SafeInt and int."""
        assert S(5) == S(5)
        assert S(5) == 5
        assert S(5) != 6

    def test_ordering(self):
        """Ordering works against SafeInt and int."""
        assert S(5) < S(6)
        assert S(5) <= 5
        assert S(6) > 5
        assert S(6) >= S(6)

    def test_bool(self):
        """Zero is falsy, anything else truthy."""
        assert bool(S(1)) is True
        assert bool(S(0)) is False


class TestSafeIntNamedOps:
    """Tests for SafeInt named operations."""

    def test_min(self):
        """min() returns the smaller value."""
        assert S(10).min(5).value == 5
        assert S(5).min(S(10)).value == 5

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (1, 1), (3, 1), (4, 2), (999_999, 999), (1_000_000, 1000), (10**36, 10**18)],
    )
    def test_sqrt_rounds_down(self, value, expected):
        """sqrt() is the integer square root, rounded down."""
        assert S(value).sqrt().value == expected

    def test_sqrt_negative_raises(self):
        """Negative square roots raise Underflow."""
        with pytest.raises(Underflow):
            S(-4).sqrt()


class TestSafeIntUint256:
    """Tests for uint256 validation."""

    def test_to_uint256_valid(self):
        """In-range values convert to int."""
        assert S(0).to_uint256() == 0
        assert S(UINT256_MAX).to_uint256() == UINT256_MAX

    def test_to_uint256_negative_raises(self):
        """Negative values are out of uint256 range."""
        with pytest.raises(Uint256Overflow) as exc_info:
            S(-1).to_uint256()
        assert "Negative" in str(exc_info.value)

    def test_to_uint256_overflow_raises(self):
        """Values above 2^256-1 overflow."""
        with pytest.raises(Uint256Overflow) as exc_info:
            S(UINT256_MAX + 1).to_uint256()
        assert "exceeds uint256" in str(exc_info.value)

    def test_is_uint256(self):
        """is_uint256() checks the range without raising."""
        assert S(UINT256_MAX).is_uint256() is True
        assert S(-1).is_uint256() is False
        assert S(UINT256_MAX + 1).is_uint256() is False


class TestSafeIntExceptionHierarchy:
    """All SafeInt errors are ArithmeticErrors under SafeIntError."""

    def test_can_catch_all_with_safeint_error(self):
        """Every SafeInt error derives from SafeIntError."""
        caught = []
        for operation in (
            lambda: S(5) - S(10),
            lambda: S(10) // S(0),
            lambda: S(-1).to_uint256(),
        ):
            try:
                operation()
            except SafeIntError as err:
                caught.append(type(err))

        assert caught == [Underflow, DivisionByZero, Uint256Overflow]
        assert issubclass(SafeIntError, ArithmeticError)
