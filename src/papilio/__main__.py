from papilio.cli import cli

cli()
