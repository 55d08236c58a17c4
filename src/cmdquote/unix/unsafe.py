# topmark:header:start
#
#   project      : CmdQuote
#   file         : unsafe.py
#   file_relpath : src/cmdquote/unix/unsafe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Characters that force quoting in Unix shells.

The class covers control characters, space and ``!"#$``, the shell
metacharacters ``&'()*;<=>?[]^```, ``{|}~``, DEL and the non-breaking space.
History expansion (``!``) is included so values stay safe in interactive Bash.
"""

from __future__ import annotations

import re
from typing import Final

UNSAFE_CHARS_RE: Final[re.Pattern[str]] = re.compile("[\\x00-\\x24&'()*;<=>?\\[\\]^`\\x7B-\\x7F\\u00A0]")


def must_quote(value: str) -> bool:
    """Report whether ``value`` contains a character special to Unix shells.

    Args:
        value (str): Raw value.

    Returns:
        bool: True if the value must be quoted.
    """
    return UNSAFE_CHARS_RE.search(value) is not None
