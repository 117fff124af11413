from randomorg.cli import app

app(prog_name="randomorg")
