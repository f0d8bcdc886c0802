"""
Controller definition registry.

The registry reads definitions.json and builds one ControllerDefinition per
device by merging the family base profile with the device's own entries::

    definitions.json
      family "launchpad_mk3"            device "Launchpad X"
        buttons: up/down/.../scenes  +    overrides.buttons: note, device, shift
        modes: standalone, program   +    overrides.modes: (none)
        windows_variants                  discovery: windows/mac/linux names
                     │                               │
                     └──────────── merge ────────────┘
                                     ↓
                      ControllerDefinition("Launchpad X")

Device values win over family values. Nothing is subclassed: adding a
device means adding a JSON entry.

Definitions are validated while loading. A file that does not match the
schema raises DefinitionFileInvalidError; a merged definition with
duplicate or out-of-range control numbers raises
DefinitionValidationError.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from gridsurface.exceptions import (
    DefinitionValidationError,
    UnknownDefinitionError,
    wrap_validation_error,
)

from .buttons import find_button_conflicts
from .definition import ControllerDefinition
from .identity import DeviceIdentity
from .schema import DefinitionRegistrySchema, Device, DeviceFamily

logger = logging.getLogger(__name__)

DEFAULT_DEFINITIONS_PATH = Path(__file__).parent / "definitions.json"


class DefinitionRegistry:
    """
    Registry of all supported controller definitions.

    Loads definitions from JSON using Pydantic validation and provides
    lookup by model name, unique id, or MIDI port name.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize definition registry.

        Args:
            config_path: Path to a definitions file.
                        If None, uses the bundled definitions.json.
        """
        if config_path is None:
            config_path = DEFAULT_DEFINITIONS_PATH

        self.config_path = config_path
        self.schema: DefinitionRegistrySchema = self._load_schema()
        self.definitions: list[ControllerDefinition] = self._flatten_definitions()

    def _load_schema(self) -> DefinitionRegistrySchema:
        """Load and validate the definitions file."""
        try:
            schema = DefinitionRegistrySchema.from_json_file(self.config_path)
        except ValidationError as e:
            logger.error(f"Failed to load definitions from {self.config_path}: {e}")
            raise wrap_validation_error(e, str(self.config_path)) from e
        except Exception as e:
            logger.error(f"Failed to load definitions from {self.config_path}: {e}")
            raise

        logger.info(f"Validated definitions from {self.config_path}")
        return schema

    def _flatten_definitions(self) -> list[ControllerDefinition]:
        """Flatten family + device entries into runtime definitions."""
        definitions = []
        seen: set[str] = set()

        for family in self.schema.families:
            for device in family.devices:
                key = device.model.lower()
                if key in seen:
                    raise DefinitionValidationError(
                        device.model, "model", "model name is defined more than once"
                    )
                seen.add(key)
                try:
                    definitions.append(self._merge_family_and_device(family, device))
                except ValidationError as e:
                    raise DefinitionValidationError(device.model, "overrides", str(e)) from e

        logger.info(f"Loaded {len(definitions)} controller definitions")
        return definitions

    def _merge_family_and_device(self, family: DeviceFamily, device: Device) -> ControllerDefinition:
        """
        Merge family and device entries into a single ControllerDefinition.

        Args:
            family: Device family configuration
            device: Specific device configuration

        Returns:
            Merged ControllerDefinition for runtime use

        Raises:
            DefinitionValidationError: If the merged button map is invalid
        """
        overrides = device.overrides

        buttons = {**family.buttons, **overrides.buttons}
        problems = find_button_conflicts(buttons)
        if problems:
            raise DefinitionValidationError(device.model, "buttons", "; ".join(problems), buttons)

        # Family patterns first, device patterns after, order kept
        patterns = list(dict.fromkeys(family.detection_patterns + device.detection_patterns))

        scene_cc = overrides.scene_buttons_use_cc
        if scene_cc is None:
            scene_cc = family.scene_buttons_use_cc

        return ControllerDefinition(
            family=family.family,
            identity=DeviceIdentity(
                unique_id=device.unique_id,
                display_name=device.model,
                vendor=family.manufacturer,
                num_input_ports=device.num_input_ports,
                num_output_ports=device.num_output_ports,
            ),
            capabilities=overrides.capabilities or family.capabilities,
            header=tuple(device.sysex_header),
            detection_patterns=tuple(patterns),
            base_discovery=tuple(family.discovery),
            windows_variants=tuple(family.windows_variants),
            discovery=device.discovery,
            buttons=tuple(buttons.items()),
            scene_buttons_cc=scene_cc,
            lighting_command=family.lighting_command,
            modes=overrides.modes.apply(family.modes),
        )

    @property
    def models(self) -> list[str]:
        """Names of all registered models."""
        return [definition.display_name for definition in self.definitions]

    def find(self, name: str) -> ControllerDefinition | None:
        """
        Find a definition by model name (case-insensitive) or unique id.

        Args:
            name: Model name or UUID string

        Returns:
            Matching definition or None
        """
        wanted = name.strip().lower()
        for definition in self.definitions:
            if definition.display_name.lower() == wanted:
                return definition
            if str(definition.identity.unique_id).lower() == wanted:
                return definition
        return None

    def get(self, name: str) -> ControllerDefinition:
        """
        Get a definition by model name or unique id.

        Raises:
            UnknownDefinitionError: If nothing is registered under ``name``
        """
        definition = self.find(name)
        if definition is None:
            raise UnknownDefinitionError(name, self.models)
        return definition

    def detect_definition(self, port_name: str) -> ControllerDefinition | None:
        """
        Detect which definition matches a port name.

        Args:
            port_name: MIDI port name string

        Returns:
            Matching definition or None if no match found
        """
        for definition in self.definitions:
            if definition.matches(port_name):
                logger.debug(f"Detected {definition.display_name} from port: {port_name}")
                return definition

        logger.debug(f"No definition matched port: {port_name}")
        return None


# Singleton instance
_registry: DefinitionRegistry | None = None


def get_registry() -> DefinitionRegistry:
    """Get singleton DefinitionRegistry instance."""
    global _registry
    if _registry is None:
        _registry = DefinitionRegistry()
    return _registry
