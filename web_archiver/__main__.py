from web_archiver.cli import cli

cli()
