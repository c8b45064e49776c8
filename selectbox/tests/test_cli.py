import json
import re
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from selectbox.cli import cli, load_catalog, parse_intent
from selectbox.errors import CatalogError
from selectbox.intents import Clear, ConfirmSearch, Search, Select, ToggleOpen
from selectbox.state import Item, init

runner = CliRunner()


@pytest.fixture
def catalog(tmp_path: Path) -> Path:
    path = tmp_path / "fruits.json"
    path.write_text(json.dumps([["Apple", 1], ["Banana", 2], {"label": "Avocado", "payload": 3}]))
    return path


def test_load_catalog_pairs_and_objects(catalog: Path):
    assert load_catalog(catalog) == [Item("Apple", 1), Item("Banana", 2), Item("Avocado", 3)]


@pytest.mark.parametrize(
    "content, message",
    [
        ("{}", "must be a JSON list"),
        ("[[1, 2]]", "non-string label"),
        ('[["only-label"]]', "not a (label, payload) pair"),
        ("not json", "Invalid JSON"),
    ],
)
def test_load_catalog_errors(tmp_path: Path, content: str, message: str):
    path = tmp_path / "bad.json"
    path.write_text(content)
    with pytest.raises(CatalogError, match=re.escape(message)):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path: Path):
    with pytest.raises(CatalogError, match="File not found"):
        load_catalog(tmp_path / "missing.json")


def test_load_catalog_directory(tmp_path: Path):
    with pytest.raises(CatalogError, match="Not a file"):
        load_catalog(tmp_path)


def test_load_catalog_not_utf8(tmp_path: Path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[["\xff\xfe", 1]]')
    with pytest.raises(CatalogError, match="not valid UTF-8"):
        load_catalog(path)


def test_parse_intent():
    state = init([Item("Apple", 1), Item("Apple", 2)])
    assert parse_intent("toggle", state) == ToggleOpen()
    assert parse_intent("clear", state) == Clear()
    assert parse_intent("confirm", state) == ConfirmSearch()
    assert parse_intent("search:a:b", state) == Search("a:b")
    assert parse_intent("search:", state) == Search("")
    assert parse_intent("select:Apple", state) == Select(Item("Apple", 1))


@pytest.mark.parametrize("token", ["jump", "toggle:now", "select:Cherry", "search"])
def test_parse_intent_rejects(token: str):
    with pytest.raises(typer.BadParameter):
        parse_intent(token, init([Item("Apple", 1)]))


def test_render_state(catalog: Path):
    result = runner.invoke(
        cli, ["render", str(catalog), "-i", "toggle", "-i", "search:av", "-i", "confirm"]
    )
    assert result.exit_code == 0, result.output
    state = json.loads(result.output)
    assert state["value"] == ["Avocado", 3]
    assert state["is_open"] is False
    assert state["search_value"] == ""
    assert state["can_clear"] is True


def test_render_vdom(catalog: Path):
    result = runner.invoke(cli, ["render", str(catalog), "--format", "vdom", "-i", "search:zzz"])
    assert result.exit_code == 0, result.output
    vdom = json.loads(result.output)
    assert vdom["tag"] == "div"
    assert "No match found" in result.output


def test_render_html(catalog: Path):
    result = runner.invoke(
        cli,
        ["render", str(catalog), "-f", "html", "--default", "Banana", "--placeholder", "Fruit"],
    )
    assert result.exit_code == 0, result.output
    assert '<div class="searchable-select">' in result.output
    assert '<li class="searchable-select-item selected">Banana</li>' in result.output
    assert 'placeholder="Fruit"' in result.output
    assert "searchable-select-clear" in result.output


def test_render_empty_widget_has_no_clear(catalog: Path):
    result = runner.invoke(
        cli, ["render", str(catalog), "--empty", "-f", "html", "-i", "select:Apple"]
    )
    assert result.exit_code == 0, result.output
    assert "searchable-select-clear" not in result.output
    assert '<span class="searchable-select-text">Apple</span>' in result.output


def test_render_bad_catalog(tmp_path: Path):
    path = tmp_path / "bad.json"
    path.write_text("{}")
    result = runner.invoke(cli, ["render", str(path)])
    assert result.exit_code == 1
    assert "must be a JSON list" in result.output


def test_render_unknown_intent(catalog: Path):
    result = runner.invoke(cli, ["render", str(catalog), "-i", "jump"])
    assert result.exit_code == 2


def test_inspect_trace(catalog: Path):
    result = runner.invoke(cli, ["inspect", str(catalog), "-i", "search:a", "-i", "confirm"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 3
    assert "visible=3/3" in lines[0]
    assert lines[1].startswith("search:a")
    assert "value='Apple'" in lines[2]


def test_render_unreadable_catalogs(tmp_path: Path):
    binary = tmp_path / "binary.json"
    binary.write_bytes(b'[["\xff\xfe", 1]]')
    for path in (binary, tmp_path):
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "❌" in result.output


def test_render_empty_ignores_default(catalog: Path):
    result = runner.invoke(cli, ["render", str(catalog), "--empty", "--default", "Apple"])
    assert result.exit_code == 0
    assert "Ignoring --default 'Apple'" in result.output
