"""
Exceptions raised by the minehunter engine.
"""


class InvalidConfigError(ValueError):
    """
    Board configuration that cannot be satisfied.

    Raised for non-positive dimensions, negative mine counts, or more
    mines than there are eligible positions. These usually come from
    user-supplied settings, so callers are expected to report them.
    """
