"""console script entrypoint for the pgdist CLI."""

from .main import main

if __name__ == "__main__":
    raise SystemExit(main())
