from phashkit.cli import run

run()
