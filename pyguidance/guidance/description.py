"""
Turn-description policy.

Builds the human-facing sentence for an instruction from its turn sign and
street name. All text comes from the translation service.
"""

from typing import Optional

from pyguidance.exceptions import InvalidInstructionError
from pyguidance.guidance.instruction import Instruction, TurnSign

# translation key of the direction phrase for each directional sign
DIRECTION_KEYS = {
    TurnSign.SHARP_LEFT: "sharp_left",
    TurnSign.LEFT: "left",
    TurnSign.SLIGHT_LEFT: "slight_left",
    TurnSign.SLIGHT_RIGHT: "slight_right",
    TurnSign.RIGHT: "right",
    TurnSign.SHARP_RIGHT: "sharp_right",
}


def turn_description(instruction: Instruction, translation,
                     via_position: Optional[int] = None) -> str:
    """
    Localized guidance sentence for an instruction.

    Parameters
    ----------
    instruction : Instruction
        The maneuver to describe.
    translation : Translation
        Any object with ``tr(key, *args) -> str``.
    via_position : int, optional
        1-based via point index for ``REACHED_VIA``; overrides the
        instruction's own ``via_position``.

    Returns
    -------
    str
        E.g. ``"turn left onto Oak Ave"`` with the English table.

    Raises
    ------
    InvalidInstructionError
        If the sign is not a known ``TurnSign``.
    """
    try:
        sign = TurnSign(instruction.sign)
    except ValueError:
        raise InvalidInstructionError(f"Indication not found {instruction.sign}") from None

    name = instruction.name
    if sign == TurnSign.FINISH:
        return translation.tr("finish")

    if sign == TurnSign.REACHED_VIA:
        position = via_position if via_position is not None else instruction.via_position
        return translation.tr("stopover", position)

    if sign == TurnSign.CONTINUE_ON_STREET:
        return translation.tr("continue_onto", name) if name else translation.tr("continue")

    direction = translation.tr(DIRECTION_KEYS[sign])
    if not name:
        return translation.tr("turn", direction)
    return translation.tr("turn_onto", direction, name)
