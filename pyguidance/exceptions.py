"""
Exception types raised by pyguidance.
"""


class InvalidInstructionError(ValueError):
    """
    An instruction reached a component in a state it can never be valid in.

    Raised for a broken invariant upstream (e.g. route assembly produced an
    instruction without points or with an unknown turn sign), never for
    recoverable input.
    """
