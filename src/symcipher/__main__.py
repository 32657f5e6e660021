"""Allow ``python -m symcipher``."""

from symcipher.cli import cli

cli(prog_name="symcipher")
