"""Tests for the command line entry point."""

import io
import json

import pytest

from grocerylist.cli import main, merge_command, parse_command, read_lines


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipe.txt"
    path.write_text("1 1/2 cups milk\n\n2 c flour\nsalt to taste\n", encoding="utf-8")
    return path


@pytest.fixture
def other_file(tmp_path):
    path = tmp_path / "other.txt"
    path.write_text("1 cup Flour\n2 large eggs\n", encoding="utf-8")
    return path


class TestReadLines:
    """Tests for read_lines."""

    def test_skips_blank_lines(self):
        """Test blank lines are dropped and newlines stripped."""
        assert read_lines(io.StringIO("a\n\n  \nb\n")) == ["a", "b"]


class TestCommands:
    """Tests for the parse and merge commands."""

    def test_parse_command(self):
        """Test parsed records are plain dicts."""
        result = parse_command(["10-15 sun-dried tomatoes, chopped"])
        assert result == [
            {
                "name": "sun-dried tomatoes, chopped",
                "quantity": 12.5,
                "unit": "",
                "display_quantity": "10-15",
                "preparation": None,
                "notes": None,
            }
        ]

    def test_merge_command(self):
        """Test two line lists are parsed and merged."""
        result = merge_command(["2 c flour"], ["1 cup Flour", "2 large eggs"])
        assert result == [
            {"name": "flour", "quantity": 3.0, "unit": "cup"},
            {"name": "eggs", "quantity": 2.0, "unit": ""},
        ]


class TestMain:
    """Tests for main."""

    def test_parse_file(self, recipe_file):
        """Test parsing a file writes JSON to stdout."""
        out = io.StringIO()
        assert main([str(recipe_file)], stdout=out) == 0

        data = json.loads(out.getvalue())
        assert [d["name"] for d in data] == ["milk", "flour", "salt"]
        assert data[0]["display_quantity"] == "1 1/2"
        assert data[2]["notes"] == "to taste"

    def test_merge_files(self, recipe_file, other_file):
        """Test --merge combines both files."""
        out = io.StringIO()
        assert main([str(recipe_file), "--merge", str(other_file)], stdout=out) == 0

        data = json.loads(out.getvalue())
        flour = [d for d in data if d["name"].lower() == "flour"]
        assert flour == [{"name": "flour", "quantity": 3.0, "unit": "cup"}]
        assert len(data) == 4

    def test_missing_file(self, tmp_path):
        """Test a missing input file exits with an argparse error."""
        with pytest.raises(SystemExit):
            main([str(tmp_path / "missing.txt")])
