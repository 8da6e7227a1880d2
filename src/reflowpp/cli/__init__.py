# topmark:header:start
#
#   project      : ReflowPP
#   file         : __init__.py
#   file_relpath : src/reflowpp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface of ReflowPP (``reflowpp`` / ``python -m reflowpp``)."""
