"""Entry point for ``python -m netplan_types``."""

from netplan_types.cli.main import main


if __name__ == "__main__":
    main()
