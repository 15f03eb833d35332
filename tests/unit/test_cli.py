"""
Tests for the triplestore command-line interface.

Uses click's CliRunner against small TSV files written to tmp_path.
"""

import pytest
from click.testing import CliRunner

from triplestore.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def facts_file(tmp_path):
    path = tmp_path / "facts.tsv"
    path.write_text(
        "# subject\tpredicate\tobject\n"
        "x\tknows\tb\n"
        "a\tknows\tc\n"
        "\n"
        "a\tknows\tb\n"
        "a\tknows\tb\n",
        encoding="utf-8",
    )
    return str(path)


class TestDump:
    def test_dump_sorted_without_duplicates(self, runner, facts_file):
        result = runner.invoke(main, ["dump", facts_file])

        assert result.exit_code == 0
        assert result.output == (
            "       a    knows        b \n"
            "       a    knows        c \n"
            "       x    knows        b \n"
        )

    def test_malformed_line_is_usage_error(self, runner, tmp_path):
        """
        A line without exactly three tab-separated fields aborts with a
        usage error naming the line.
        """
        path = tmp_path / "bad.tsv"
        path.write_text("a\tknows\tb\nonly two\tfields\n", encoding="utf-8")

        result = runner.invoke(main, ["dump", str(path)])

        assert result.exit_code == 2
        assert "line 2" in result.output


class TestQuery:
    def test_query_with_wildcard(self, runner, facts_file):
        result = runner.invoke(main, ["query", facts_file, "a", "knows", "*"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "       a    knows        b ",
            "       a    knows        c ",
        ]

    def test_query_no_match_prints_nothing(self, runner, facts_file):
        result = runner.invoke(main, ["query", facts_file, "nobody", "*", "*"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_wildcard_option(self, runner, facts_file):
        """
        With --wildcard, "*" is a literal and the new string is wild.
        """
        literal = runner.invoke(main, ["--wildcard", "?", "query", facts_file, "a", "knows", "*"])
        wild = runner.invoke(main, ["--wildcard", "?", "query", facts_file, "?", "knows", "b"])

        assert literal.exit_code == 0
        assert literal.output == ""
        assert wild.output.splitlines() == [
            "       a    knows        b ",
            "       x    knows        b ",
        ]

    def test_config_file(self, runner, facts_file, tmp_path):
        config = tmp_path / "store.toml"
        config.write_text('[triplestore]\nwildcard = "_"\n', encoding="utf-8")

        result = runner.invoke(
            main, ["--config", str(config), "query", facts_file, "_", "_", "c"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["       a    knows        c "]


class TestRemove:
    def test_remove_reports_count_and_remaining(self, runner, facts_file):
        result = runner.invoke(main, ["remove", facts_file, "*", "knows", "b"])

        assert result.exit_code == 0
        assert result.output == "Removed 2 fact(s).\n       a    knows        c \n"
