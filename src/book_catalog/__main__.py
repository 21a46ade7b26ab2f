"""Allow ``python -m book_catalog``."""

from .cli import main

main()
