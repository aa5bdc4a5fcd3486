# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/01_config.pct.py

# %% pts/padserve/01_config.pct.py 3
import os
import tomllib
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Mapping

import tomli_w
from dotenv import load_dotenv

from padserve.leftpad import DEFAULT_WIDTH

# %% pts/padserve/01_config.pct.py 5
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_GREETING = "hello yarn berry"
CONFIG_FILENAME = "padserve.toml"
PORT_ENV_VAR = "PORT"

# %% pts/padserve/01_config.pct.py 7
@dataclass
class ServeConfig:
    """Settings for a single server process."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    greeting: str = DEFAULT_GREETING
    width: int = DEFAULT_WIDTH
    verbose: bool = False

# %% pts/padserve/01_config.pct.py 9
def parse_port(value) -> int:
    """Parse and range-check a port number. ``0`` means any free port."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port {value!r}: must be an integer")
    if not 0 <= port <= 65535:
        raise ValueError(f"Invalid port {port}: must be between 0 and 65535")
    return port

# %% pts/padserve/01_config.pct.py 10
def resolve_port(environ: Mapping[str, str] | None = None, default: int = DEFAULT_PORT) -> int:
    """Read the listening port from ``PORT``, falling back to *default* if unset or empty."""
    env = os.environ if environ is None else environ
    raw = env.get(PORT_ENV_VAR, "").strip()
    if not raw:
        return default
    return parse_port(raw)

# %% pts/padserve/01_config.pct.py 12
def default_config_path() -> Path:
    """Return ``padserve.toml`` in the current directory."""
    return Path.cwd() / CONFIG_FILENAME

# %% pts/padserve/01_config.pct.py 13
def load_config_file(path: Path) -> ServeConfig:
    """Load the ``[server]`` table from a TOML file.

    Raises ``FileNotFoundError`` if *path* is missing and ``ValueError`` on
    unknown keys or bad values.
    """
    with open(path, "rb") as f:
        raw = tomllib.load(f)

    data = dict(raw.get("server", {}))
    valid_keys = {f.name for f in fields(ServeConfig)}
    unknown = set(data) - valid_keys
    if unknown:
        raise ValueError(
            f"Unknown key(s) in [server] of {path}: {', '.join(sorted(unknown))}. "
            f"Valid keys: {', '.join(sorted(valid_keys))}"
        )
    if "port" in data:
        data["port"] = parse_port(data["port"])
    cfg = ServeConfig(**data)
    _check_width(cfg.width)
    return cfg

# %% pts/padserve/01_config.pct.py 14
def save_config(config: ServeConfig, path: Path | None = None) -> Path:
    """Write *config* as a ``[server]`` table. Returns the path written."""
    p = path or default_config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    d = asdict(config)
    # verbose is a runtime switch, not a persisted setting
    d.pop("verbose", None)
    with open(p, "wb") as f:
        tomli_w.dump({"server": d}, f)
    return p

# %% pts/padserve/01_config.pct.py 15
def _check_width(width: int) -> None:
    if width < 0:
        raise ValueError(f"Invalid width {width}: must be >= 0")

# %% pts/padserve/01_config.pct.py 17
def load_config(
    path: Path | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
    verbose: bool | None = None,
    env_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ServeConfig:
    """Resolve the effective configuration.

    An explicit *path* must exist; without one, ``padserve.toml`` in the
    working directory is used if present. Keyword arguments are CLI overrides
    and win over everything else.
    """
    if path is not None:
        cfg = load_config_file(path)
    elif default_config_path().exists():
        cfg = load_config_file(default_config_path())
    else:
        cfg = ServeConfig()

    if environ is None:
        load_dotenv(env_file or Path.cwd() / ".env", override=False)
    cfg.port = resolve_port(environ, default=cfg.port)

    if host is not None:
        cfg.host = host
    if port is not None:
        cfg.port = parse_port(port)
    if verbose is not None:
        cfg.verbose = verbose
    return cfg
