"""
Exceptions raised by cel-tools.
"""


class FormatError(ValueError):
    """
    Raised when a CEL or CL2 blob is malformed: truncated headers or frames,
    command streams that run past their frame, or frame geometry that cannot
    be resolved.
    """
