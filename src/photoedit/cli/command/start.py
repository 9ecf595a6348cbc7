"""Start command implementation"""

import os

import click
from pydantic import ValidationError
from rich.console import Console

from ..util import (
    get_instance_path,
    is_initialized,
    is_running,
    get_pid_file,
)

console = Console()


@click.command(name="start", help="Start the photo editor backend server")
@click.argument(
    "path",
    type=click.Path(),
    required=False,
)
def start(path: str = None):
    """Start the backend server in the foreground

    Args:
        path: Instance directory path (default: ~/.photoedit)
    """
    instance_path = get_instance_path(path)

    if not is_initialized(instance_path):
        console.print(
            f"[red]Error: Not initialized at {instance_path}[/red]"
        )
        console.print(
            f"[yellow]Run: photoedit init {path if path else ''}[/yellow]"
        )
        raise click.Abort()

    if is_running(instance_path):
        console.print("[red]Error: Instance already running[/red]")
        console.print(f"[yellow]Location: {instance_path}[/yellow]")
        raise click.Abort()

    # Settings read config.toml from the instance path in the environment
    from ...backend.config import Settings, INSTANCE_PATH_ENV
    os.environ[INSTANCE_PATH_ENV] = str(instance_path)

    try:
        settings = Settings()
    except ValidationError as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise click.Abort()

    host = settings.server_host
    port = settings.server_port

    console.print(f"[cyan]Starting photo editor from {instance_path}[/cyan]")
    console.print(f"[cyan]Server: http://{host}:{port}[/cyan]")
    console.print(f"[cyan]Docs: http://{host}:{port}/docs[/cyan]")
    console.print("")

    import uvicorn
    from ...backend.app import create_app

    app = create_app(settings)

    pid_file = get_pid_file(instance_path)
    pid_file.write_text(str(os.getpid()))

    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
        )
    finally:
        pid_file.unlink(missing_ok=True)
