"""Module entrypoint for `python -m envassert`."""

from envassert.main import main

main()
