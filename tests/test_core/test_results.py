"""Tests for the result accumulator."""

import pytest

from datastream_validator.core.results import CheckResult, record, summarize


class TestRecord:

    def test_truthy_outcome_records_pass_message(self):
        results = record(True, (), "ok", "bad")
        assert results == ((True, "ok"),)

    def test_falsy_outcome_records_fail_message(self):
        results = record(False, (), "ok", "bad")
        assert results == ((False, "bad"),)

    def test_falsy_outcome_without_fail_message_reuses_pass_message(self):
        results = record(False, (), "ok")
        assert results == ((False, "ok"),)

    def test_empty_fail_message_is_used(self):
        results = record(False, (), "ok", "")
        assert results[0].message == ""

    @pytest.mark.parametrize("outcome", [0, None, "", [], 0.0])
    def test_loose_falsy_values_fail(self, outcome):
        assert record(outcome, (), "ok")[0].passed is False

    @pytest.mark.parametrize("outcome", [1, 3, "yes", [0]])
    def test_loose_truthy_values_pass(self, outcome):
        assert record(outcome, (), "ok")[0].passed is True

    def test_appends_exactly_one_and_preserves_order(self):
        first = record(True, (), "first")
        second = record(False, first, "second", "second failed")

        assert len(second) == len(first) + 1
        assert second[0] == CheckResult(True, "first")
        assert second[1] == CheckResult(False, "second failed")

    def test_input_is_not_modified(self):
        original = (CheckResult(True, "kept"),)
        record(False, original, "new")
        assert original == (CheckResult(True, "kept"),)

    def test_accepts_plain_lists(self):
        results = record(True, [(True, "a")], "b")
        assert len(results) == 2
        assert results[1].message == "b"


class TestSummarize:

    def test_counts(self):
        results = record(True, (), "a")
        results = record(False, results, "b")
        results = record(True, results, "c")
        assert summarize(results) == (2, 1)

    def test_empty(self):
        assert summarize(()) == (0, 0)
