"""CLI entrypoint: Typer app definition and command registration"""

import typer

from txt2md.cli.commands import archive_cmd, convert_cmd, formats_cmd, preview_cmd


app = typer.Typer(name="txt2md", no_args_is_help=True, help="Convert plain text and Word files to Markdown")

app.command(name="convert")(convert_cmd)
app.command(name="archive")(archive_cmd)
app.command(name="preview")(preview_cmd)
app.command(name="formats")(formats_cmd)
