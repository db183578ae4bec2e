"""CLI commands for Folio."""

import asyncio
import sys
from pathlib import Path

import click


@click.group()
@click.version_option(package_name="folio")
def cli():
    """Folio - portfolio CMS API."""
    pass


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8080, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Logging level",
)
def serve(host, port, reload, workers, log_level):
    """Run the Folio API server."""
    import signal

    from hypercorn.asyncio import serve as hypercorn_serve
    from hypercorn.config import Config

    config = Config()
    config.application_path = "folio.asgi:app"
    config.bind = [f"{host}:{port}"]
    config.workers = 1 if reload else workers
    config.loglevel = log_level.upper()
    config.include_server_header = False

    if reload:
        config.use_reloader = True
        from hypercorn.run import run
        run(config)
        return

    from folio.asgi import app

    shutdown_event = asyncio.Event()

    loop = asyncio.new_event_loop()
    loop.add_signal_handler(signal.SIGINT, shutdown_event.set)
    loop.add_signal_handler(signal.SIGTERM, shutdown_event.set)
    try:
        loop.run_until_complete(
            hypercorn_serve(app, config, shutdown_trigger=shutdown_event.wait)
        )
    finally:
        loop.close()


def _run_alembic(args: list[str]) -> None:
    """Build an Alembic Config programmatically and run the given command."""
    from alembic.config import CommandLine, Config

    folio_dir = Path(__file__).parent
    alembic_ini = folio_dir / "alembic.ini"
    if not alembic_ini.exists():
        click.echo("Error: Could not find alembic.ini", err=True)
        sys.exit(1)

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(folio_dir / "alembic"))

    cmd = CommandLine()
    options = cmd.parser.parse_args(args)
    if not hasattr(options, "cmd"):
        cmd.parser.error("too few arguments")
    else:
        cfg.cmd_opts = options
        fn, positional, kwarg = options.cmd
        fn(
            cfg,
            *[getattr(options, k, None) for k in positional],
            **{k: getattr(options, k, None) for k in kwarg},
        )


@cli.command(
    context_settings=dict(
        ignore_unknown_options=True,
        allow_extra_args=True,
    )
)
@click.pass_context
def db(ctx):
    """Run database migrations via Alembic.

    \b
    Examples:
        folio db upgrade head      # Apply all migrations
        folio db downgrade -1      # Rollback one migration
        folio db current           # Show current revision
        folio db history           # Show migration history
        folio db revision -m "description" --autogenerate  # Create new migration
    """
    args = ctx.args
    if not args:
        click.echo(ctx.get_help())
        return

    _run_alembic(args)


@cli.command("add-admin")
@click.argument("email")
@click.option("--name", default=None, help="Display name for the admin")
def add_admin(email, name):
    """Allow EMAIL to use the admin endpoints."""
    from folio.app_config import build_db_config
    from folio.config import get_settings
    from folio.db.services import admin_service

    db_config = build_db_config(get_settings())

    async def _add():
        async with db_config.get_session() as db_session:
            admin = await admin_service.add_admin(db_session, email, name)
        await db_config.get_engine().dispose()
        return admin

    admin = asyncio.run(_add())
    click.echo(f"{admin.email} is an admin")


if __name__ == "__main__":
    cli()
