"""Tests for button tables."""

import pytest

from gridsurface.definitions import SCENE_BUTTONS, ButtonID
from gridsurface.definitions.buttons import find_button_conflicts


class TestFindButtonConflicts:
    """Test button table validation."""

    @pytest.mark.unit
    def test_valid_table(self):
        assert find_button_conflicts({ButtonID.UP: 91, ButtonID.DOWN: 92}) == []

    @pytest.mark.unit
    def test_duplicate_control_number(self):
        problems = find_button_conflicts({ButtonID.UP: 91, ButtonID.DOWN: 91})

        assert problems == ["down and up both use control 91"]

    @pytest.mark.unit
    @pytest.mark.parametrize("number", [-1, 128])
    def test_out_of_range(self, number):
        problems = find_button_conflicts({ButtonID.SHIFT: number})

        assert len(problems) == 1
        assert "outside 0-127" in problems[0]


class TestLaunchpadXButtons:
    """Test the Launchpad X button table."""

    def test_known_controls(self, launchpad_x):
        buttons = launchpad_x.button_ids()

        assert buttons[ButtonID.UP] == 91
        assert buttons[ButtonID.DOWN] == 92
        assert buttons[ButtonID.LEFT] == 93
        assert buttons[ButtonID.RIGHT] == 94
        assert buttons[ButtonID.SESSION] == 95
        assert buttons[ButtonID.NOTE] == 96
        assert buttons[ButtonID.DEVICE] == 97
        assert buttons[ButtonID.SHIFT] == 98

    def test_scene_buttons_top_to_bottom(self, launchpad_x):
        buttons = launchpad_x.button_ids()

        assert [buttons[b] for b in SCENE_BUTTONS] == [89, 79, 69, 59, 49, 39, 29, 19]

    def test_injective(self, registry):
        for definition in registry.definitions:
            values = list(definition.button_ids().values())
            assert len(values) == len(set(values)), definition.display_name
            assert all(0 <= v <= 127 for v in values)

    def test_unsupported_buttons_absent(self, launchpad_x):
        buttons = launchpad_x.button_ids()

        assert ButtonID.PLAY not in buttons
        assert ButtonID.RECORD not in buttons
        assert buttons.get(ButtonID.STOP_CLIP) is None

    def test_returns_copy(self, launchpad_x):
        launchpad_x.button_ids().clear()

        assert launchpad_x.button_ids()[ButtonID.UP] == 91

    def test_scene_buttons_use_cc(self, launchpad_x):
        assert launchpad_x.scene_buttons_use_cc() is True

    def test_reverse_lookup(self, launchpad_x):
        assert launchpad_x.button_for_control(98) == ButtonID.SHIFT
        assert launchpad_x.button_for_control(19) == ButtonID.SCENE8
        assert launchpad_x.button_for_control(60) is None


class TestLaunchpadMiniButtons:
    """Test the Mini MK3 overrides."""

    def test_user_instead_of_shift(self, launchpad_mini):
        buttons = launchpad_mini.button_ids()

        assert buttons[ButtonID.USER] == 98
        assert ButtonID.SHIFT not in buttons

    def test_family_buttons_inherited(self, launchpad_mini):
        buttons = launchpad_mini.button_ids()

        assert buttons[ButtonID.UP] == 91
        assert buttons[ButtonID.SCENE1] == 89
