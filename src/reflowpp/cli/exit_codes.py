# topmark:header:start
#
#   project      : ReflowPP
#   file         : exit_codes.py
#   file_relpath : src/reflowpp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ReflowPP CLI.

Failures follow the BSD ``sysexits`` convention so that shell scripts and
other tooling can tell a malformed document from a missing file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ReflowPP CLI.

    Attributes:
        SUCCESS: The document was rendered.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        INPUT_ERROR: Malformed input document (XML, JSON or TOML). Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: Reading the input or writing the output failed. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or unusable configuration file. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    INPUT_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
