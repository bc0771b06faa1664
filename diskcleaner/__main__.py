from diskcleaner.cli import app

app(prog_name="diskcleaner")
