import pytest

from aliasfinder import config


def write_config(home, content):
    home.mkdir(parents=True, exist_ok=True)
    (home / "config.yaml").write_text(content)


def test_packaged_defaults():
    settings = config.load_settings()
    assert settings.exact is False
    assert settings.longer is False
    assert settings.cheaper is False
    assert settings.engine == "auto"
    assert settings.max_rounds == 8


def test_user_config_overrides_defaults(isolated_config):
    write_config(isolated_config, "cheaper: true\nengine: python\nmax_rounds: 3\n")
    settings = config.load_settings()
    assert settings.cheaper is True
    assert settings.engine == "python"
    assert settings.max_rounds == 3


@pytest.mark.parametrize("value, expected", [("true", True), ("TRUE", True), ("yes", False)])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("ALIAS_FINDER_EXACT", value)
    assert config.env_flag("exact") is expected


def test_env_flag_unset():
    assert config.env_flag("exact") is None


def test_env_overrides_config_file(isolated_config, monkeypatch):
    write_config(isolated_config, "longer: true\n")
    monkeypatch.setenv("ALIAS_FINDER_LONGER", "false")
    monkeypatch.setenv("ALIAS_FINDER_CHEAPER", "true")
    settings = config.load_settings()
    assert settings.longer is False
    assert settings.cheaper is True


def test_explicit_flag_wins():
    settings = config.Settings(exact=True)
    assert settings.resolve("exact", False) is False
    assert settings.resolve("exact", None) is True


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "must be a dict"),
        ("exact: maybe\n", "'exact' must be true or false"),
        ("engine: grep\n", "'engine' must be one of"),
        ("max_rounds: -1\n", "'max_rounds'"),
    ],
)
def test_invalid_config_fails_fast(isolated_config, content, message):
    write_config(isolated_config, content)
    with pytest.raises(ValueError, match=message):
        config.load_config()


def test_config_is_cached(isolated_config):
    first = config.load_config()
    write_config(isolated_config, "exact: true\n")
    assert config.load_config() is first
    config.clear_cache()
    assert config.load_config()["exact"] is True
