from tutum.cli.main import app

app(prog_name="tutum")
