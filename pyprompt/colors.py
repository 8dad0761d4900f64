"""
Minimal SGR styling. Each function wraps a string in an open/close pair,
so styles can be nested.
"""


def _style(s, open, close):
    return f"\x1b[{open}m{s}\x1b[{close}m"


def bold(s):
    return _style(s, 1, 22)


def italic(s):
    return _style(s, 3, 23)


def blue(s):
    return _style(s, 34, 39)


def default_message_style(s):
    return bold(blue(s))
