# AUTOGENERATED! DO NOT EDIT! File to edit: pts/tests/test_config.pct.py

# %% pts/tests/test_config.pct.py 3
import pytest

from padserve.config import (
    DEFAULT_PORT, ServeConfig,
    parse_port, resolve_port, load_config_file, save_config, load_config,
)

# %% pts/tests/test_config.pct.py 5
def test_resolve_port_unset():
    """No PORT variable falls back to 8080."""
    assert resolve_port({}) == DEFAULT_PORT == 8080

# %% pts/tests/test_config.pct.py 6
@pytest.mark.parametrize("value", ["", "   "])
def test_resolve_port_empty(value):
    assert resolve_port({"PORT": value}) == 8080

# %% pts/tests/test_config.pct.py 7
def test_resolve_port_override():
    assert resolve_port({"PORT": "9999"}) == 9999

# %% pts/tests/test_config.pct.py 8
def test_resolve_port_custom_default():
    assert resolve_port({}, default=9000) == 9000

# %% pts/tests/test_config.pct.py 9
def test_resolve_port_not_integer():
    with pytest.raises(ValueError, match="must be an integer"):
        resolve_port({"PORT": "http"})

# %% pts/tests/test_config.pct.py 10
@pytest.mark.parametrize("value", [-1, 65536, "70000"])
def test_parse_port_out_of_range(value):
    with pytest.raises(ValueError, match="between 0 and 65535"):
        parse_port(value)

# %% pts/tests/test_config.pct.py 12
def test_save_load_roundtrip(tmp_path):
    """Save then load produces the same config."""
    p = tmp_path / "padserve.toml"
    cfg = ServeConfig(host="127.0.0.1", port=9001, greeting="hi", width=10)
    save_config(cfg, p)
    loaded = load_config_file(p)
    assert loaded == cfg

# %% pts/tests/test_config.pct.py 13
def test_save_omits_verbose(tmp_path):
    p = tmp_path / "padserve.toml"
    save_config(ServeConfig(verbose=True), p)
    text = p.read_text()
    assert "[server]" in text
    assert "verbose" not in text

# %% pts/tests/test_config.pct.py 14
def test_load_unknown_key(tmp_path):
    p = tmp_path / "padserve.toml"
    p.write_text('[server]\nport = 8080\ncolour = "blue"\n')
    with pytest.raises(ValueError, match="Unknown key"):
        load_config_file(p)

# %% pts/tests/test_config.pct.py 15
def test_load_negative_width(tmp_path):
    p = tmp_path / "padserve.toml"
    p.write_text("[server]\nwidth = -1\n")
    with pytest.raises(ValueError, match="Invalid width"):
        load_config_file(p)

# %% pts/tests/test_config.pct.py 16
def test_load_missing_server_table(tmp_path):
    """A file without [server] yields defaults."""
    p = tmp_path / "padserve.toml"
    p.write_text("")
    assert load_config_file(p) == ServeConfig()

# %% pts/tests/test_config.pct.py 18
def test_load_config_defaults(tmp_path, monkeypatch):
    """No file and no PORT gives the built-in defaults."""
    monkeypatch.chdir(tmp_path)
    assert load_config(environ={}) == ServeConfig()

# %% pts/tests/test_config.pct.py 19
def test_load_config_picks_up_cwd_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    save_config(ServeConfig(port=9000), tmp_path / "padserve.toml")
    assert load_config(environ={}).port == 9000

# %% pts/tests/test_config.pct.py 20
def test_load_config_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.toml", environ={})

# %% pts/tests/test_config.pct.py 21
def test_env_overrides_file(tmp_path):
    p = tmp_path / "padserve.toml"
    save_config(ServeConfig(port=9000), p)
    assert load_config(p, environ={"PORT": "9100"}).port == 9100

# %% pts/tests/test_config.pct.py 22
def test_cli_overrides_env(tmp_path):
    p = tmp_path / "padserve.toml"
    save_config(ServeConfig(port=9000, host="0.0.0.0"), p)
    cfg = load_config(p, host="127.0.0.1", port=9200, verbose=True, environ={"PORT": "9100"})
    assert cfg.port == 9200
    assert cfg.host == "127.0.0.1"
    assert cfg.verbose is True

# %% pts/tests/test_config.pct.py 23
def test_dotenv_supplies_port(tmp_path, monkeypatch):
    """A .env file is read when PORT is not in the environment."""
    # setenv first so undo also removes the PORT that load_dotenv writes
    monkeypatch.setenv("PORT", "")
    monkeypatch.delenv("PORT")
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=9300\n")
    monkeypatch.chdir(tmp_path)
    assert load_config(env_file=env_file).port == 9300

# %% pts/tests/test_config.pct.py 24
def test_dotenv_does_not_override_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "9400")
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=9300\n")
    monkeypatch.chdir(tmp_path)
    assert load_config(env_file=env_file).port == 9400
