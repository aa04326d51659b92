from jobscope.cli.app import app

app()
