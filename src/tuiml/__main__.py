from tuiml.cli.main import app

app()
