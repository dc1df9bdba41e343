"""Tests for the timing harness (bench.py)."""

import logging

import pytest

from onbfield.bench import DEFAULT_A, DEFAULT_B, main, run_benchmark
from onbfield.element import FieldElement
from onbfield.exponent import inverse, power


@pytest.fixture
def operands():
    return FieldElement.from_bitstring(DEFAULT_A), FieldElement.from_bitstring(DEFAULT_B)


class TestRunBenchmark:

    def test_operations_in_order(self, operands):
        a, b = operands
        results = run_benchmark(a, b, "101")
        assert [r.operation for r in results] == [
            "Addition",
            "a^2",
            "Trace of a",
            "Multiplication",
            "Inverse of a",
            "a^N",
        ]

    def test_values(self, operands):
        a, b = operands
        values = [r.value for r in run_benchmark(a, b, "11")]
        assert values == [a + b, a.square(), a.trace(), a * b, inverse(a), power(a, "11")]

    def test_timings_non_negative(self, operands):
        a, b = operands
        for r in run_benchmark(a, b, "1", repeat=2):
            assert r.seconds >= 0
            assert r.microseconds >= 0

    def test_repeat_must_be_positive(self, operands):
        a, b = operands
        with pytest.raises(ValueError):
            run_benchmark(a, b, "1", repeat=0)


class TestMain:

    def test_reports_every_operation(self, caplog):
        caplog.set_level(logging.INFO, logger="onbfield")
        assert main(["--exponent", "11"]) == 0
        for label in ("Addition:", "a^2:", "Trace of a:", "Multiplication:", "Inverse of a:", "a^N:"):
            assert label in caplog.text
        assert "microseconds" in caplog.text

    def test_custom_operands(self, caplog):
        caplog.set_level(logging.INFO, logger="onbfield")
        assert main(["-a", "11", "-b", "01", "--exponent", "1"]) == 0
        expected = FieldElement.from_bitstring("10").to_bitstring()
        assert f"Addition: {expected}" in caplog.text

    def test_invalid_operand(self, caplog):
        assert main(["-a", "102"]) == 2
        assert "Invalid input" in caplog.text

    def test_invalid_repeat(self, caplog):
        assert main(["--exponent", "1", "--repeat", "0"]) == 2


class TestConfiguration:
    """Bad CLI flags or environment settings exit with status 2."""

    def test_invalid_log_level_flag(self):
        with pytest.raises(SystemExit) as exc:
            main(["--exponent", "1", "--log-level", "bogus"])
        assert exc.value.code == 2

    def test_log_level_is_case_insensitive(self, caplog):
        caplog.set_level(logging.INFO, logger="onbfield")
        assert main(["--exponent", "1", "--log-level", "info"]) == 0

    def test_invalid_log_level_env(self, monkeypatch):
        monkeypatch.setenv("ONBFIELD_LOG_LEVEL", "bogus")
        with pytest.raises(SystemExit) as exc:
            main(["--exponent", "1"])
        assert exc.value.code == 2

    def test_non_integer_repeat_flag(self):
        with pytest.raises(SystemExit) as exc:
            main(["--exponent", "1", "--repeat", "many"])
        assert exc.value.code == 2

    def test_non_integer_repeat_env(self, monkeypatch):
        monkeypatch.setenv("ONBFIELD_BENCH_REPEAT", "many")
        with pytest.raises(SystemExit) as exc:
            main(["--exponent", "1"])
        assert exc.value.code == 2

    def test_repeat_env(self, monkeypatch, caplog):
        caplog.set_level(logging.INFO, logger="onbfield")
        monkeypatch.setenv("ONBFIELD_BENCH_REPEAT", "2")
        assert main(["--exponent", "1"]) == 0
