import pytest

from pickles.config import ShellConfig
from pickles.session import SearchSession

TOKENS = {
    "colors": {
        "primary": "#336699",
        "secondary": "#f00",
        "gray": {"100": "#f5f5f5", "900": "#212121"},
    },
    "spacing": {"small": "4px", "medium": "16px", "large": "100px"},
    "fonts": ["Inter", "Menlo"],
    "enabled": True,
    "opacity": 0.5,
    "missing": None,
}


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv("PICKLES_STATE_DIR", raising=False)
    return ShellConfig(config_path=str(tmp_path / "config.yaml"))


@pytest.fixture
def session(config):
    s = SearchSession(config)
    s.load(TOKENS, "tokens.json")
    return s


@pytest.fixture
def tokens():
    return TOKENS
