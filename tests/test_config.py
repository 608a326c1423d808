import pytest

import lineread.config as config_module
from lineread.config import AppConfig, ConfigError, ReaderConfig, find_config_path, load_app_config
from lineread.reader import EofPolicy, PromptStyle


def test_find_config_prefers_cli_path(tmp_path, monkeypatch):
    cli_config = tmp_path / "cli.toml"
    env_config = tmp_path / "env.toml"
    cli_config.write_text("[reader]\n", encoding="utf-8")
    env_config.write_text("[reader]\n", encoding="utf-8")

    monkeypatch.setenv("LINEREAD_CONFIG", str(env_config))
    assert find_config_path(str(cli_config)) == cli_config.resolve()
    assert find_config_path() == env_config.resolve()


def test_find_config_returns_none_when_nothing_exists(tmp_path, monkeypatch):
    monkeypatch.delenv("LINEREAD_CONFIG", raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", [str(tmp_path / "missing.toml")])
    assert find_config_path() is None


def test_load_app_config_defaults_when_missing():
    config = load_app_config(None)
    assert isinstance(config, AppConfig)
    assert config.reader == ReaderConfig()
    assert config.reader.encoding == "utf-8"
    assert config.reader.policy == "fail"
    assert config.ui.rich is True
    assert config.path is None


def test_load_app_config_reads_values(tmp_path):
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
[reader]
encoding = "latin-1"
prompt_style = "line"
policy = "tolerate"
blank_is_eof = true

[ui]
rich = false
        """,
        encoding="utf-8",
    )

    config = load_app_config(config_path)
    assert config.reader.encoding == "latin-1"
    assert config.reader.prompt_style == "line"
    assert config.reader.blank_is_eof is True
    assert config.ui.rich is False
    assert config.path == config_path.resolve()
    assert config.reader.read_kwargs() == {
        "encoding": "latin-1",
        "prompt_style": PromptStyle.LINE,
        "policy": EofPolicy.TOLERATE,
        "blank_is_eof": True,
    }


@pytest.mark.parametrize(
    "body",
    [
        '[reader]\nprompt_style = "sideways"\n',
        '[reader]\npolicy = "ignore"\n',
        '[reader]\nencoding = "no-such-codec"\n',
        "[reader]\nblank_is_eof = true\n",
        '[reader]\nblank_is_eof = "yes"\npolicy = "tolerate"\n',
        '[ui]\nrich = "no"\n',
        'reader = "flat"\n',
        "[reader\n",
    ],
)
def test_load_app_config_rejects_invalid_values(tmp_path, body):
    config_path = tmp_path / "config.toml"
    config_path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_app_config(config_path)


def test_load_app_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_app_config(tmp_path / "absent.toml")


def test_initialize_default_config_creates_loadable_file(tmp_path, monkeypatch):
    target = tmp_path / "lineread" / "config.toml"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", [str(target)])

    created = config_module.initialize_default_config()

    assert created == target.resolve()
    assert load_app_config(created).reader == ReaderConfig()
