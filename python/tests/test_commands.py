import json

import pytest

from pickles.commands import CommandRegistry


@pytest.fixture
def registry(config, session):
    return CommandRegistry(config, session)


def test_load_command(registry, session, tmp_path):
    path = tmp_path / "palette.json"
    path.write_text(json.dumps({"red": "#f00"}), encoding="utf-8")
    registry.dispatch("load", [str(path)])
    assert session.file_name == "palette.json"
    assert [e.path for e in session.entries] == ["red"]


def test_load_errors_are_reported_not_raised(registry, session, tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    registry.dispatch("load", [str(path)])
    assert "Invalid JSON file" in capsys.readouterr().out
    assert session.file_name == "tokens.json"


def test_remove_command(registry, session):
    registry.dispatch("remove", [])
    assert not session.loaded


def test_sort_objects_command(registry, config, capsys):
    registry.dispatch("sort-objects", ["key-smart"])
    assert config.object_sort == "key-smart"
    registry.dispatch("sort-objects", ["upside-down"])
    assert config.object_sort == "key-smart"
    assert "Unknown object sort" in capsys.readouterr().out


def test_sort_results_command(registry, config):
    registry.dispatch("sort-results", ["value"])
    assert config.results_sort == ("value", "asc")
    registry.dispatch("sort-results", ["value"])
    assert config.results_sort == ("value", "desc")
    registry.dispatch("sort-results", ["path", "desc"])
    assert config.results_sort == ("path", "desc")
    registry.dispatch("sort-results", ["none"])
    assert config.results_sort is None


def test_pick_by_row_and_path(registry, session):
    picked = []
    session.on_pick(picked.append)
    session.set_query("spacing")
    registry.dispatch("pick", ["2"])
    assert picked[-1].path == "spacing.medium"
    registry.dispatch("pick", ["colors.gray.900"])
    assert picked[-1].path == "colors.gray.900"
    assert session.query == "colors.gray.900"


def test_pick_out_of_range(registry, session, capsys):
    session.set_query("spacing")
    registry.dispatch("pick", ["9"])
    assert "No primitive result #9" in capsys.readouterr().out


def test_toggles(registry, config, session):
    registry.dispatch("copy-last", [])
    assert config.copy_last_property_only is True
    registry.dispatch("copy-last", ["off"])
    assert config.copy_last_property_only is False
    registry.dispatch("dark", ["on"])
    assert session.dark_mode is True


def test_results_and_help_render(registry, session, capsys):
    session.set_query("gray")
    registry.dispatch("results", [])
    registry.dispatch("help", [])
    registry.dispatch("help", ["sort"])
    out = capsys.readouterr().out
    assert "colors.gray" in out
    assert "pickles Commands" in out


def test_unknown_command(registry, capsys):
    registry.dispatch("frobnicate", [])
    assert "Unknown command" in capsys.readouterr().out


def test_exit_raises_eof(registry):
    with pytest.raises(EOFError):
        registry.dispatch("exit", [])
