import pytest

from termsearch.core.errors import (
    FetchFailed, InvalidDecode, InvalidTerm, OutcomeError, Underlying,
)
from termsearch.core.outcome import Failure, Success, outcome_from


class TestOutcome:
    """Test the Success/Failure combinators."""

    def test_variant_flags(self):
        assert Success(1).is_success and not Success(1).is_failure
        assert Failure("e").is_failure and not Failure("e").is_success

    def test_map_only_touches_success(self):
        assert Success(2).map(lambda v: v * 10) == Success(20)
        assert Failure("boom").map(lambda v: v * 10) == Failure("boom")

    def test_map_error_only_touches_failure(self):
        assert Failure("boom").map_error(str.upper) == Failure("BOOM")
        assert Success(3).map_error(str.upper) == Success(3)

    def test_flat_map_chains_and_short_circuits(self):
        def halve(v):
            return Success(v // 2) if v % 2 == 0 else Failure("odd")

        assert Success(8).flat_map(halve).flat_map(halve) == Success(2)
        assert Success(6).flat_map(halve).flat_map(halve) == Failure("odd")

        called = []
        Failure("early").flat_map(lambda v: called.append(v))
        assert called == []

    def test_unwrap(self):
        assert Success(b"abc").unwrap() == b"abc"
        with pytest.raises(OutcomeError) as exc_info:
            Failure(InvalidTerm("x")).unwrap()
        assert exc_info.value.error == InvalidTerm("x")

    def test_unwrap_or(self):
        assert Success(1).unwrap_or(5) == 1
        assert Failure("e").unwrap_or(5) == 5

    def test_outcomes_are_immutable(self):
        outcome = Success(1)
        with pytest.raises(AttributeError):
            outcome.value = 2


class TestOutcomeFrom:
    """Test building outcomes from (value, error) pairs."""

    def test_error_wins(self):
        assert outcome_from(b"data", "err") == Failure("err")

    def test_value_only(self):
        assert outcome_from(b"data", None) == Success(b"data")

    def test_neither_is_rejected(self):
        with pytest.raises(ValueError):
            outcome_from(None, None)


class TestErrors:
    """Test error value equality."""

    def test_fetch_failed_compares_by_kind_and_message(self):
        assert FetchFailed(ConnectionError("refused")) == FetchFailed(ConnectionError("refused"))
        assert FetchFailed(ConnectionError("refused")) != FetchFailed(TimeoutError("refused"))
        assert FetchFailed(ConnectionError("refused")) != FetchFailed(ConnectionError("reset"))

    def test_fetch_failed_keeps_cause(self):
        cause = ConnectionError("refused")
        failed = FetchFailed(cause)
        assert failed.cause is cause
        assert failed.kind == "ConnectionError"
        assert "refused" in str(failed)

    def test_underlying_wraps_network_error(self):
        err = Underlying(FetchFailed(OSError("dns")))
        assert err == Underlying(FetchFailed(OSError("dns")))
        assert str(err) == "fetch failed: OSError: dns"

    def test_invalid_decode_reason_is_not_compared(self):
        assert InvalidDecode("not JSON") == InvalidDecode("top-level list")
        assert InvalidDecode() == InvalidDecode("anything")
