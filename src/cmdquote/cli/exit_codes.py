# topmark:header:start
#
#   project      : CmdQuote
#   file         : exit_codes.py
#   file_relpath : src/cmdquote/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the CmdQuote CLI.

CmdQuote aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `MUST_QUOTE=2`, returned by ``cmdquote check`` when a
value needs quoting. Click also exits with 2 on its own usage errors, which are
told apart by the usage banner they print.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the CmdQuote CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        MUST_QUOTE: ``check`` found at least one value that must be quoted.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        SYNTAX_ERROR: A quoted value is malformed. Mirrors BSD ``EX_DATAERR (65)``.
    """

    SUCCESS = 0
    FAILURE = 1
    MUST_QUOTE = 2  # diverges from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    SYNTAX_ERROR = 65  # EX_DATAERR
