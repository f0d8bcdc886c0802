"""Abstract button roles and the checks applied to a device's button table."""

from collections.abc import Mapping
from enum import Enum


class ButtonID(str, Enum):
    """Abstract button roles a control surface may expose."""

    SHIFT = "shift"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SESSION = "session"
    NOTE = "note"
    DEVICE = "device"
    USER = "user"
    SCENE1 = "scene1"
    SCENE2 = "scene2"
    SCENE3 = "scene3"
    SCENE4 = "scene4"
    SCENE5 = "scene5"
    SCENE6 = "scene6"
    SCENE7 = "scene7"
    SCENE8 = "scene8"
    # Roles only found on larger models
    PLAY = "play"
    RECORD = "record"
    MUTE = "mute"
    SOLO = "solo"
    DELETE = "delete"
    DUPLICATE = "duplicate"
    QUANTIZE = "quantize"
    CLIP = "clip"
    VOLUME = "volume"
    PAN = "pan"
    SENDS = "sends"
    STOP_CLIP = "stop_clip"


SCENE_BUTTONS: tuple[ButtonID, ...] = (
    ButtonID.SCENE1,
    ButtonID.SCENE2,
    ButtonID.SCENE3,
    ButtonID.SCENE4,
    ButtonID.SCENE5,
    ButtonID.SCENE6,
    ButtonID.SCENE7,
    ButtonID.SCENE8,
)


def find_button_conflicts(buttons: Mapping[ButtonID, int]) -> list[str]:
    """
    Describe every way a button table breaks the device rules.

    Control numbers must be MIDI data bytes (0-127) and no two roles may
    share one.

    Args:
        buttons: Mapping of role to control number

    Returns:
        Human-readable problems, empty when the table is valid
    """
    problems = []
    owners: dict[int, ButtonID] = {}

    for button, number in buttons.items():
        if not 0 <= number <= 127:
            problems.append(f"{button.value}={number} is outside 0-127")
            continue

        if number in owners:
            problems.append(
                f"{button.value} and {owners[number].value} both use control {number}"
            )
        else:
            owners[number] = button

    return problems
