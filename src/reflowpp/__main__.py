# topmark:header:start
#
#   project      : ReflowPP
#   file         : __main__.py
#   file_relpath : src/reflowpp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m reflowpp``."""

from reflowpp.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="reflowpp")
