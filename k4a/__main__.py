"""Allow ``python -m k4a``."""

from k4a.cli import main

if __name__ == "__main__":
    main()
