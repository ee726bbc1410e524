"""Endpoint descriptors and request path construction."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote


@dataclass(frozen=True)
class EndpointDescriptor:
    """A single declared HTTP call.

    Parameters
    - path_template: Path relative to the base URL, e.g. ``/breed/{breed}/images``
    - path_params: Values substituted into the template's placeholders
    - expected_status: HTTP status code the call must return
    """

    path_template: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    expected_status: int = 200
    method: str = "GET"

    def __post_init__(self):
        # Freeze the parameter mapping along with the dataclass itself.
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))

    def build_path(self) -> str:
        """Substitute path parameters into the template.

        Each value is encoded as a single URL segment; nothing beyond that
        is escaped. Raises ``ValueError`` when a placeholder has no value.
        """
        encoded = {
            name: quote(str(value), safe="")
            for name, value in self.path_params.items()
        }
        try:
            return self.path_template.format_map(encoded)
        except KeyError as e:
            raise ValueError(
                f"Missing path parameter {e.args[0]!r} for template {self.path_template!r}"
            ) from e
