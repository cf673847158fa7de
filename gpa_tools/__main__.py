"""Allow running the package with ``python -m gpa_tools``."""

from .cli import main

main()
