"""Allow ``python -m utf8sweep``."""

from utf8sweep.cli import main

if __name__ == "__main__":
    main()
