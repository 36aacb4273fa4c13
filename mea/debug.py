"""Pretty-printing helper for debugging."""

import sys
from pprint import pformat


def debug_print(*args, stream=None):
    """Pretty-print ``args`` separated by spaces, followed by a newline."""
    print(*map(pformat, args), file=stream or sys.stdout)