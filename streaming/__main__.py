"""Run the catalog demo: ``python -m streaming [--format json] ...``."""

import os
import sys


def main(argv: list[str] | None = None) -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "streaming.settings")
    from django.core.management import execute_from_command_line

    args = sys.argv[1:] if argv is None else argv
    execute_from_command_line(["streaming", "run_demo", *args])


if __name__ == "__main__":
    main()
