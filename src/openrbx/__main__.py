"""Allow running openrbx with ``python -m openrbx``."""

from openrbx.cli import main

if __name__ == "__main__":
    main()
