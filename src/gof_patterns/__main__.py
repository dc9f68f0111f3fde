"""Allow ``python -m gof_patterns``."""

from gof_patterns.cli.main import run

run()
