# topmark:header:start
#
#   project      : JsLiteral
#   file         : exit_codes.py
#   file_relpath : src/jsliteral/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process exit codes of the ``jsliteral`` command.

Failures use the BSD ``sysexits.h`` numbers so shell scripts and build tools
can tell a bad document (65) from a missing one (66) or a broken
configuration (78).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of a ``jsliteral`` invocation.

    Every `jsliteral.cli.errors.JsliteralError` subclass carries one of these.
    ``FAILURE`` is only the base-class default; concrete errors pick a
    specific code.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE: bad flags or arguments
    DATA_ERROR = 65  # EX_DATAERR: unparseable input or a value with no expression form
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    # The serializer raised something other than a SerializationError.
    UNEXPECTED_ERROR = 255
