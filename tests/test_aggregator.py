"""Tests for result aggregation."""

import pytest
from yaml_lint import ValidationResult, ValidationSummary, summarize


def _results(valid: int, invalid: int):
    results = [ValidationResult.ok(f"ok-{i}.yaml") for i in range(valid)]
    results += [ValidationResult.failed(f"bad-{i}.yaml", "boom", line=1) for i in range(invalid)]
    return results


class TestSummarize:
    """Tests for summarize."""

    def test_all_valid(self):
        """Test that zero errors gives exit code 0."""
        summary, exit_code = summarize(_results(3, 0))
        assert summary == ValidationSummary(total=3, errored=0)
        assert exit_code == 0

    @pytest.mark.parametrize("valid,invalid", [(0, 1), (1, 1), (2, 5), (0, 10)])
    def test_exit_code_is_binary(self, valid, invalid):
        """Test that any number of errors gives exit code 1."""
        summary, exit_code = summarize(_results(valid, invalid))
        assert summary.total == valid + invalid
        assert summary.errored == invalid
        assert exit_code == 1

    def test_empty(self):
        """Test that no results is a success."""
        summary, exit_code = summarize([])
        assert summary == ValidationSummary(total=0, errored=0)
        assert exit_code == 0

    def test_order_independent(self):
        """Test that counts do not depend on order."""
        results = _results(2, 2)
        assert summarize(results) == summarize(list(reversed(results)))

    def test_accepts_iterator(self):
        """Test that a generator of results is accepted."""
        summary, _ = summarize(r for r in _results(1, 1))
        assert summary.total == 2


class TestValidationSummary:
    """Tests for ValidationSummary."""

    def test_valid_count(self):
        assert ValidationSummary(total=5, errored=2).valid_count == 3

    def test_errored_bounds(self):
        """Test that errored cannot exceed total."""
        with pytest.raises(ValueError):
            ValidationSummary(total=1, errored=2)
        with pytest.raises(ValueError):
            ValidationSummary(total=1, errored=-1)
