"""Allow `python -m hddcheck`."""
from hddcheck.cli import app

app()
