"""Allow ``python -m advent``."""

from .cli import main

main()
