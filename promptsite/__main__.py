"""Allow ``python -m promptsite``."""

from promptsite.cli import main

if __name__ == "__main__":
    main()
