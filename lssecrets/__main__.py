"""Allow `python -m lssecrets`."""

from lssecrets.cli import main

if __name__ == "__main__":
    main()
