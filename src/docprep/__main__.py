"""Allow ``python -m docprep``."""

from docprep.cli import main

if __name__ == "__main__":
    main()
