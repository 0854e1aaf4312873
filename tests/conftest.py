import pytest

from rosezip.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at an empty directory and drop ROSEZIP_* overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in (
        "ROSEZIP_INDENT",
        "ROSEZIP_DEMO_COUNT",
        "ROSEZIP_DEMO_PERIOD",
        "ROSEZIP_DEMO_REWIND",
        "ROSEZIP_DEMO_ROOT",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
