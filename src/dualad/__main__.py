from dualad.cli import app

app(prog_name="dualad")
