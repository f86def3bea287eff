"""
Tests for score aggregation over chain files and the command line.
"""

import pytest
from click.testing import CliRunner

from blnverify import (
    AggregateScore,
    ChainSpec,
    ScoreAggregator,
    VerificationResult,
    iter_blocks,
    main,
    verify_file,
)


class TestBlocks:
    """Test splitting a chain file into blocks."""

    def test_blank_lines_separate_blocks(self):
        lines = ["C = 1000 a b\n", "\n", "\n", "  C = 1000 b a  \n", "   \n", "x"]
        assert list(iter_blocks(lines)) == [["C = 1000 a b"], ["C = 1000 b a"], ["x"]]

    def test_multi_line_blocks(self):
        lines = ["C = 0010 a b", "D = 0100 a b", "", "E = 1110 C D"]
        assert list(iter_blocks(lines)) == [["C = 0010 a b", "D = 0100 a b"], ["E = 1110 C D"]]

    def test_empty(self):
        assert list(iter_blocks(["", "  ", ""])) == []


class TestAggregateScore:
    """Each violation halves the score."""

    def test_empty(self):
        total = AggregateScore()
        assert total.score == 0.0

    def test_halving(self):
        total = AggregateScore()
        total.record(VerificationResult(passed=True))
        total.record(VerificationResult(passed=False))
        total.record(VerificationResult(passed=False))
        assert total.points == 3
        assert total.violations == 2
        assert total.score == 0.75
        assert total.summary_lines() == [
            "[i] violations = 2",
            "[i] solutions = 3",
            "[i] points = 0.75",
        ]


class TestScoreAggregator:
    """Test verification of whole chain files."""

    def test_one_pass_one_fail(self, and2_spec):
        total = ScoreAggregator(and2_spec).run([["C = 1000 a b"], ["C = 1000 b a"]])
        assert (total.violations, total.points, total.score) == (1, 2, 1.0)
        assert [result.passed for result in total.results] == [True, False]

    def test_threads_keep_file_order(self, and2_spec):
        blocks = [["C = 1000 a b"], ["C = 1000 b a"], ["C = 1110 a b"], ["C = 1000 a b"]] * 5
        serial = ScoreAggregator(and2_spec).run(blocks)
        threaded = ScoreAggregator(and2_spec).run(blocks, jobs=4)
        assert threaded.results == serial.results
        assert (threaded.violations, threaded.points) == (10, 20)

    def test_jobs_must_be_positive(self, and2_spec):
        with pytest.raises(ValueError):
            ScoreAggregator(and2_spec).run([], jobs=0)

    def test_verify_file(self, and2_spec, write_chains):
        path = write_chains("chains.bln", ["C = 1000 a b"], ["C = 0001 a b"], ["C = 1000 a b"])
        total = verify_file(and2_spec, str(path))
        assert (total.violations, total.points) == (1, 3)
        assert total.score == 1.5

    def test_verify_default_file(self, and2_spec, write_chains, tmp_path, monkeypatch):
        write_chains("8-2-1.bln", ["C = 1000 a b"])
        monkeypatch.chdir(tmp_path)
        total = verify_file(and2_spec)
        assert (total.violations, total.points) == (0, 1)


class TestCommandLine:
    """Test the bln-verify entry point."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_summary(self, runner, write_chains):
        path = write_chains("8-2-1.bln", ["C = 1000 a b"], ["C = 1000 b a"])
        result = runner.invoke(main, ["2", "8", "2", "1", "-i", str(path)])
        assert result.exit_code == 0
        assert "[i] violations = 1" in result.output
        assert "[i] solutions = 2" in result.output
        assert "[i] points = 1.0" in result.output
        assert "[e]" not in result.output

    def test_default_filename(self, runner, write_chains, tmp_path, monkeypatch):
        write_chains("8-2-1.bln", ["C = 1000 a b"])
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(main, ["2", "8", "2", "1"])
        assert result.exit_code == 0
        assert "[i] violations = 0" in result.output
        assert "[i] points = 1.0" in result.output

    def test_verbose_reports_violation(self, runner, write_chains):
        path = write_chains("8-2-1.bln", ["C = 1000 b a"])
        result = runner.invoke(main, ["2", "8", "2", "1", "-i", str(path), "--verbose"])
        assert result.exit_code == 0
        assert "[e] fanins are in wrong order in C = 1000 b a" in result.output

    def test_symmetry_advisory_is_printed(self, runner, write_chains):
        path = write_chains("80-2-2.bln", ["D = 1000 b c", "E = 1000 a D"])
        result = runner.invoke(main, ["3", "80", "2", "2", "-i", str(path)])
        assert result.exit_code == 0
        assert "symmetry property violated in 0 and 1" in result.output
        assert "symmetry property violated in 0 and 2" in result.output
        assert "[i] violations = 0" in result.output
        assert "[i] solutions = 1" in result.output

    def test_jobs_option(self, runner, write_chains):
        path = write_chains("8-2-1.bln", ["C = 1000 a b"], ["C = 1110 a b"], ["C = 1000 a b"])
        result = runner.invoke(main, ["2", "8", "2", "1", "-i", str(path), "-j", "3"])
        assert result.exit_code == 0
        assert "[i] violations = 1" in result.output
        assert "[i] points = 1.5" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["2", "8", "2", "1", "-i", str(tmp_path / "nope.bln")])
        assert result.exit_code == 1
        assert "[e] cannot read chain file" in result.output

    def test_invalid_target(self, runner):
        result = runner.invoke(main, ["2", "88", "2", "1"])
        assert result.exit_code == 1
        assert "[e] Invalid target truth table" in result.output

    def test_too_many_signals(self, runner):
        result = runner.invoke(main, ["3", "80", "2", "24"])
        assert result.exit_code == 1

    def test_non_numeric_argument(self, runner):
        result = runner.invoke(main, ["two", "8", "2", "1"])
        assert result.exit_code == 2

    def test_missing_argument(self, runner):
        result = runner.invoke(main, ["2", "8", "2"])
        assert result.exit_code == 2
