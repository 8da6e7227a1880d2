# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``reflowpp`` CLI."""
