"""Tests for MIDI port discovery pairs."""

from unittest.mock import patch

import pytest

from gridsurface.definitions import DiscoveryPair, OperatingSystem, select_ports
from gridsurface.definitions.discovery import DiscoveryTemplates, build_discovery_pairs


class TestOperatingSystem:
    """Test current OS detection."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("Windows", OperatingSystem.WINDOWS),
            ("Darwin", OperatingSystem.MAC),
            ("Linux", OperatingSystem.LINUX),
            ("FreeBSD", OperatingSystem.OTHER),
        ],
    )
    def test_current(self, system, expected):
        with patch("gridsurface.definitions.discovery.platform.system", return_value=system):
            assert OperatingSystem.current() == expected


class TestBuildDiscoveryPairs:
    """Test candidate list construction."""

    @pytest.fixture
    def templates(self):
        return DiscoveryTemplates(
            windows=DiscoveryPair(input_pattern="IN (%sDEV)", output_pattern="OUT (%sDEV)"),
            mac=DiscoveryPair(input_pattern="Dev Out", output_pattern="Dev In"),
        )

    @pytest.fixture
    def base(self):
        return [DiscoveryPair(input_pattern="Generic", output_pattern="Generic")]

    @pytest.mark.unit
    def test_windows_expands_every_variant_in_order(self, base, templates):
        pairs = build_discovery_pairs(OperatingSystem.WINDOWS, base, templates, ["", "2- "])

        assert pairs == [
            base[0],
            DiscoveryPair(input_pattern="IN (DEV)", output_pattern="OUT (DEV)"),
            DiscoveryPair(input_pattern="IN (2- DEV)", output_pattern="OUT (2- DEV)"),
        ]

    @pytest.mark.unit
    def test_mac_appends_one_literal_pair(self, base, templates):
        pairs = build_discovery_pairs(OperatingSystem.MAC, base, templates, [""])

        assert pairs == [base[0], templates.mac]

    @pytest.mark.unit
    def test_missing_template_gives_base_only(self, base, templates):
        assert build_discovery_pairs(OperatingSystem.LINUX, base, templates, [""]) == base

    @pytest.mark.unit
    def test_other_os_gives_base_only(self, base, templates):
        assert build_discovery_pairs(OperatingSystem.OTHER, base, templates, [""]) == base

    @pytest.mark.unit
    def test_base_list_is_copied(self, base, templates):
        pairs = build_discovery_pairs(OperatingSystem.MAC, base, templates, [""])
        pairs.clear()

        assert len(base) == 1


class TestLaunchpadXDiscovery:
    """Test the Launchpad X port names."""

    def test_windows(self, launchpad_x):
        pairs = launchpad_x.discovery_pairs(OperatingSystem.WINDOWS)

        assert len(pairs) >= 2
        assert pairs[0] == DiscoveryPair(
            input_pattern="MIDIIN2 (LPX MIDI)", output_pattern="MIDIOUT2 (LPX MIDI)"
        )
        assert pairs[1] == DiscoveryPair(
            input_pattern="MIDIIN2 (2- LPX MIDI)", output_pattern="MIDIOUT2 (2- LPX MIDI)"
        )
        for pair in pairs:
            assert "%s" not in pair.input_pattern
            assert "LPX MIDI" in pair.input_pattern
            assert "LPX MIDI" in pair.output_pattern

    def test_mac(self, launchpad_x):
        pairs = launchpad_x.discovery_pairs(OperatingSystem.MAC)

        assert pairs[-1] == DiscoveryPair(
            input_pattern="Launchpad X LPX MIDI Out", output_pattern="Launchpad X LPX MIDI In"
        )

    def test_linux(self, launchpad_x):
        pairs = launchpad_x.discovery_pairs(OperatingSystem.LINUX)

        assert pairs[-1] == DiscoveryPair(
            input_pattern="Launchpad X MIDI 2", output_pattern="Launchpad X MIDI 2"
        )

    def test_other_os_returns_base_list(self, launchpad_x):
        assert launchpad_x.discovery_pairs(OperatingSystem.OTHER) == list(launchpad_x.base_discovery)

    def test_defaults_to_current_os(self, launchpad_x):
        with patch("gridsurface.definitions.discovery.platform.system", return_value="Darwin"):
            assert launchpad_x.discovery_pairs() == launchpad_x.discovery_pairs(OperatingSystem.MAC)

    @pytest.mark.parametrize("os", [OperatingSystem.WINDOWS, OperatingSystem.MAC, OperatingSystem.LINUX])
    def test_supported_os_not_empty(self, launchpad_x, os):
        assert launchpad_x.discovery_pairs(os)


class TestLaunchpadMiniDiscovery:
    """Test the Launchpad Mini MK3 port names."""

    def test_windows(self, launchpad_mini):
        pairs = launchpad_mini.discovery_pairs(OperatingSystem.WINDOWS)

        assert [pair.input_pattern for pair in pairs] == [
            "MIDIIN2 (LPMiniMK3 MIDI)",
            "MIDIIN2 (2- LPMiniMK3 MIDI)",
            "MIDIIN2 (3- LPMiniMK3 MIDI)",
            "MIDIIN2 (4- LPMiniMK3 MIDI)",
        ]
        assert pairs[3].output_pattern == "MIDIOUT2 (4- LPMiniMK3 MIDI)"

    def test_mac(self, launchpad_mini):
        pairs = launchpad_mini.discovery_pairs(OperatingSystem.MAC)

        assert pairs[-1] == DiscoveryPair(
            input_pattern="Launchpad Mini MK3 LPMiniMK3 MIDI Out",
            output_pattern="Launchpad Mini MK3 LPMiniMK3 MIDI In",
        )

    def test_linux(self, launchpad_mini):
        pairs = launchpad_mini.discovery_pairs(OperatingSystem.LINUX)

        assert pairs[-1] == DiscoveryPair(
            input_pattern="Launchpad Mini MK3 MIDI 2", output_pattern="Launchpad Mini MK3 MIDI 2"
        )


class TestSelectPorts:
    """Test first-match-wins port selection."""

    @pytest.fixture
    def pairs(self, launchpad_x):
        return launchpad_x.discovery_pairs(OperatingSystem.WINDOWS)

    @pytest.mark.unit
    def test_first_pair_wins(self, pairs):
        inputs = ["MIDIIN2 (LPX MIDI)", "MIDIIN2 (2- LPX MIDI)", "LPX MIDI"]
        outputs = ["MIDIOUT2 (LPX MIDI)", "MIDIOUT2 (2- LPX MIDI)", "LPX MIDI"]

        assert select_ports(pairs, inputs, outputs) == pairs[0]

    @pytest.mark.unit
    def test_later_pair_when_first_missing(self, pairs):
        inputs = ["MIDIIN2 (2- LPX MIDI)"]
        outputs = ["MIDIOUT2 (2- LPX MIDI)"]

        assert select_ports(pairs, inputs, outputs) == pairs[1]

    @pytest.mark.unit
    def test_ambiguous_pair_skipped(self, pairs):
        inputs = ["MIDIIN2 (LPX MIDI)", "MIDIIN2 (LPX MIDI)", "MIDIIN2 (2- LPX MIDI)"]
        outputs = ["MIDIOUT2 (LPX MIDI)", "MIDIOUT2 (2- LPX MIDI)"]

        assert select_ports(pairs, inputs, outputs) == pairs[1]

    @pytest.mark.unit
    def test_output_must_match_too(self, pairs):
        assert select_ports(pairs, ["MIDIIN2 (LPX MIDI)"], []) is None

    @pytest.mark.unit
    def test_no_pairs(self):
        assert select_ports([], ["a"], ["b"]) is None
