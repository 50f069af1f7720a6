"""CLI entrypoint: Typer app definition and command registration"""

import typer

from artpub.cli.commands import faq_cmd, toc_cmd, transform_cmd


app = typer.Typer(name="artpub", no_args_is_help=True, help="Article markup pipeline: anchors, toc, and FAQ extraction")

app.command(name="transform")(transform_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="faq")(faq_cmd)
