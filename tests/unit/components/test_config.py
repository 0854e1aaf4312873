"""
Unit tests for config loading: defaults, TOML file, env overrides.
"""

from rosezip.config import Config, get_config, get_config_path, load_config, reset_config


def write_config(tmp_path, text):
    path = tmp_path / "xdg" / "rosezip" / "config.toml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDefaults:
    def test_defaults(self):
        cfg = load_config()
        assert cfg == Config()
        assert cfg.render.indent == 4
        assert (cfg.demo.count, cfg.demo.period, cfg.demo.rewind, cfg.demo.root) == (26, 6, 5, -1)

    def test_config_path_respects_xdg(self, tmp_path):
        assert get_config_path() == tmp_path / "xdg" / "rosezip" / "config.toml"

    def test_config_path_without_xdg(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert get_config_path() == tmp_path / "home" / ".config" / "rosezip" / "config.toml"


class TestTomlFile:
    def test_file_values_applied(self, tmp_path):
        write_config(tmp_path, "[render]\nindent = 2\n\n[demo]\ncount = 12\nrewind = 3\n")
        cfg = load_config()
        assert cfg.render.indent == 2
        assert cfg.demo.count == 12
        assert cfg.demo.rewind == 3
        assert cfg.demo.period == 6

    def test_broken_file_falls_back_to_defaults(self, tmp_path):
        write_config(tmp_path, "[render\nindent = ")
        assert load_config() == Config()

    def test_bad_value_falls_back_to_defaults(self, tmp_path):
        write_config(tmp_path, '[render]\nindent = "wide"\n')
        assert load_config() == Config()


class TestEnvOverrides:
    def test_env_overrides_file(self, tmp_path, monkeypatch):
        write_config(tmp_path, "[render]\nindent = 2\n")
        monkeypatch.setenv("ROSEZIP_INDENT", "8")
        monkeypatch.setenv("ROSEZIP_DEMO_ROOT", "100")
        cfg = load_config()
        assert cfg.render.indent == 8
        assert cfg.demo.root == 100

    def test_unparsable_env_ignored(self, monkeypatch):
        monkeypatch.setenv("ROSEZIP_DEMO_PERIOD", "often")
        assert load_config().demo.period == 6


class TestGlobalConfig:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_reloads(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("ROSEZIP_INDENT", "3")
        assert get_config().render.indent == 4
        reset_config()
        second = get_config()
        assert second is not first
        assert second.render.indent == 3
