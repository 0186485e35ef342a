from labyrinth.cli.main import app

app()
