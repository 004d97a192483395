"""Allow ``python -m astar_search``."""

from astar_search.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
