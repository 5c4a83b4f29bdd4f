"""Configuration classes for pathwalk components."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import IO, Any, Dict, Union

import yaml

from pathwalk.types.base import Direction
from pathwalk.utils.yaml_utils import normalize_yaml_dict_keys


@dataclass
class SearchConfig:
    """Package-wide defaults for traversal construction."""

    # Fail fast with KeyError when the source node is not in the graph
    validate_source: bool = True

    # Direction used when traversal options do not name one
    default_direction: Direction = Direction.OUT

    # Edge attribute read by ``attr_cost`` when no attribute name is given
    default_cost_attr: str = "cost"

    def __post_init__(self) -> None:
        """Coerce string directions and validate field types."""
        if isinstance(self.default_direction, str):
            self.default_direction = Direction.from_string(self.default_direction)
        elif not isinstance(self.default_direction, Direction):
            raise ValueError(
                f"default_direction must be a Direction or string, "
                f"got {type(self.default_direction).__name__}"
            )
        if not isinstance(self.validate_source, bool):
            raise ValueError("validate_source must be a boolean")
        if not isinstance(self.default_cost_attr, str) or not self.default_cost_attr:
            raise ValueError("default_cost_attr must be a non-empty string")

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> "SearchConfig":
        """Build a configuration from a mapping.

        Args:
            data: Mapping of field name to value.

        Returns:
            A new SearchConfig.

        Raises:
            ValueError: If the mapping contains unknown keys.
        """
        normalized = normalize_yaml_dict_keys(data)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(
                f"Unknown search config keys: {', '.join(unknown)}. "
                f"Valid keys are: {', '.join(sorted(known))}"
            )
        return cls(**normalized)

    @classmethod
    def from_yaml(cls, text: Union[str, bytes, IO[Any]]) -> "SearchConfig":
        """Build a configuration from a YAML document.

        An empty document yields the defaults.

        Raises:
            ValueError: If the document is not a mapping or has unknown keys.
        """
        data = yaml.safe_load(text)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Search config YAML must be a mapping")
        return cls.from_dict(data)

    def update(self, other: "SearchConfig") -> None:
        """Copy every field of ``other`` onto this instance.

        Modules hold the global `SEARCH_CONFIG` by reference; change it in
        place with this method instead of rebinding the name.
        """
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))


# Global configuration instance
SEARCH_CONFIG = SearchConfig()


def load_config(source: Union[str, bytes, IO[Any]]) -> SearchConfig:
    """Load a YAML document into the global `SEARCH_CONFIG`.

    Keys missing from the document take their default values; the result
    replaces the whole previous configuration.

    Args:
        source: YAML text or an open stream.

    Returns:
        The updated global `SEARCH_CONFIG`.

    Raises:
        ValueError: If the document is not a mapping, has unknown keys, or
            holds invalid values. The global configuration is left unchanged.
    """
    SEARCH_CONFIG.update(SearchConfig.from_yaml(source))
    return SEARCH_CONFIG
