from renderstats.cli import app

app()
