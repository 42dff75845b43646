from marketrpc.cli import app

app()
