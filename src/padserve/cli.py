# AUTOGENERATED! DO NOT EDIT! File to edit: pts/padserve/05_cli.pct.py

# %% pts/padserve/05_cli.pct.py 2
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from padserve.config import DEFAULT_GREETING, ServeConfig, load_config, save_config, default_config_path
from padserve.lifecycle import run
from padserve.probe import probe as probe_url, wait_for_server, default_url

# %% pts/padserve/05_cli.pct.py 4
app = typer.Typer(
    name="padserve",
    help="Serve a left-padded greeting over HTTP.",
    no_args_is_help=True,
)
console = Console()

# %% pts/padserve/05_cli.pct.py 6
from padserve import __version__

@app.command()
def version():
    """Show the padserve version."""
    typer.echo(f"padserve {__version__}")

# %% pts/padserve/05_cli.pct.py 8
@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind"),
    port: Optional[int] = typer.Option(None, help="Port to listen on (default: $PORT or 8080)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a padserve.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request"),
):
    """Run the server until SIGTERM."""
    try:
        cfg = load_config(config, host=host, port=port, verbose=verbose or None)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    raise typer.Exit(code=run(cfg))

# %% pts/padserve/05_cli.pct.py 10
@app.command()
def probe(
    url: Optional[str] = typer.Option(None, help="URL to check (default: http://127.0.0.1:$PORT/)"),
    expect: str = typer.Option(DEFAULT_GREETING, help="Text the body must contain"),
    timeout: float = typer.Option(2.0, help="Timeout in seconds for each request, including retries under --wait"),
    wait: float = typer.Option(0.0, help="Keep retrying for up to this many seconds"),
):
    """Check that a running server answers 200 with the greeting."""
    if url is None:
        try:
            url = default_url(load_config().port)
        except (ValueError, FileNotFoundError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(code=1)

    if wait > 0:
        result = wait_for_server(url, expect=expect, deadline=wait, timeout=timeout)
    else:
        result = probe_url(url, expect=expect, timeout=timeout)

    if not result.ok:
        console.print(f"[red]Probe failed:[/red] {url}: {result.error}")
        raise typer.Exit(code=1)
    console.print(f"[green]OK[/green] {url} -> {result.status} {result.body!r}")

# %% pts/padserve/05_cli.pct.py 12
config_app = typer.Typer(
    name="config",
    help="Manage padserve.toml.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# %% pts/padserve/05_cli.pct.py 13
@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, help="Where to write (default: ./padserve.toml)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    """Write a default configuration file."""
    p = path or default_config_path()
    if p.exists() and not force:
        console.print(f"[red]Error:[/red] {p} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)
    save_config(ServeConfig(), p)
    console.print(f"Wrote [bold]{p}[/bold].")

# %% pts/padserve/05_cli.pct.py 14
@config_app.command("show")
def config_show(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a padserve.toml"),
):
    """Show the resolved configuration."""
    try:
        cfg = load_config(config)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="padserve configuration")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("host", cfg.host)
    table.add_row("port", str(cfg.port))
    table.add_row("greeting", repr(cfg.greeting))
    table.add_row("width", str(cfg.width))
    console.print(table)
