"""Allow ``python -m lmsadmin``."""

from lmsadmin.cli import main

if __name__ == "__main__":
    main()
