"""Errors.

Runtime problems inside a Baby program are ordinary
:class:`~babylang.objects.Error` values. The exceptions here cover the
host-side failures around evaluation: source that does not parse and script
files that cannot be read.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseException(Exception):
    """
    Error for source that failed to parse.
    """
    def __init__(self, errors, file=None):
        self.errors = list(errors)
        self.file = file
        count = len(self.errors)
        message = f"{count} syntax error{'s' if count != 1 else ''}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class ScriptLoadException(Exception):
    """
    Error for a script file that is missing or unreadable.
    """
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Could not load script '{path}'"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)
