"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdlite.cli.commands import fields_cmd, presets_cmd, render_cmd, show_cmd


app = typer.Typer(name="mdlite", no_args_is_help=True, help="Parse AI response text into structured documents")

app.command(name="render")(render_cmd)
app.command(name="show")(show_cmd)
app.command(name="fields")(fields_cmd)
app.command(name="presets")(presets_cmd)
