"""Run the REST API."""

import click


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=3333, show_default=True, type=int, help="Port to listen on")
@click.pass_context
def serve(ctx, host: str, port: int):
    """Serve the transaction API over HTTP."""
    import uvicorn

    from pennywise.api.app import create_app

    app = create_app(ctx.obj["db"])
    click.echo(f"Serving pennywise API on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
