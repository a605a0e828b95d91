"""
Resource Bundles
================

Localized string tables used to resolve form and input labels and help text.

The renderers only depend on the narrow ``StringTable`` protocol; ``ResourceBundle``
is the in-memory implementation, buildable from a mapping or a YAML document.
"""

from typing import Any, Dict, Iterator, Mapping, Protocol, runtime_checkable
import yaml  # type: ignore[import-untyped]

from formdisplay.config.logging import get_logger

logger = get_logger(__name__)


class BundleLoader(yaml.SafeLoader):
    """Safe loader keeping yes/no/on/off/true/false as text, in keys and values alike."""


BundleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class MissingResourceError(KeyError):
    """Exception raised when a key is not present in a bundle."""

    def __init__(self, key: str, bundle_name: str) -> None:
        super().__init__(key)
        self.key = key
        self.bundle_name = bundle_name

    def __str__(self) -> str:
        return f"Can't find resource for bundle {self.bundle_name}, key {self.key}"


class BundleFormatError(ValueError):
    """Exception raised when a bundle document cannot be turned into a string table."""

    pass


@runtime_checkable
class StringTable(Protocol):
    """Key to localized string lookup."""

    def get_string(self, key: str) -> str:
        """Return the string for ``key``; raise ``KeyError`` if absent."""
        ...


class ResourceBundle:
    """Immutable in-memory string table."""

    def __init__(self, strings: Mapping[str, str], name: str = "default") -> None:
        self.name = name
        self._strings: Dict[str, str] = dict(strings)

    @classmethod
    def from_mapping(cls, strings: Mapping[str, str], name: str = "default") -> "ResourceBundle":
        """
        Build a bundle from a key to string mapping.

        Args:
            strings: Localized strings by key; copied, later changes are not seen
            name: Bundle name used in lookup errors

        Returns:
            Resource bundle
        """
        return cls(strings, name=name)

    @classmethod
    def from_yaml(cls, content: str, name: str = "default") -> "ResourceBundle":
        """
        Build a bundle from a YAML document.

        Nested mappings are flattened into dotted keys, so
        ``{"link": {"label": "Link"}}`` provides ``link.label``.

        Args:
            content: YAML document text
            name: Bundle name used in lookup errors

        Returns:
            Resource bundle

        Raises:
            BundleFormatError: If the document is not a mapping of scalars
        """
        try:
            data = yaml.load(content, Loader=BundleLoader)
        except yaml.YAMLError as e:
            raise BundleFormatError(f"Invalid YAML in bundle {name}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise BundleFormatError(f"Bundle {name} must be a mapping, got {type(data).__name__}")

        strings: Dict[str, str] = {}
        cls._flatten(data, "", strings, name)
        logger.debug("Loaded resource bundle", bundle=name, keys=len(strings))
        return cls(strings, name=name)

    @staticmethod
    def _flatten(data: Dict[Any, Any], prefix: str, out: Dict[str, str], name: str) -> None:
        for key, value in data.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, dict):
                ResourceBundle._flatten(value, f"{full_key}.", out, name)
            elif isinstance(value, (list, tuple)):
                raise BundleFormatError(f"Bundle {name} key {full_key} holds a list")
            elif value is None:
                out[full_key] = ""
            else:
                out[full_key] = str(value)

    def get_string(self, key: str) -> str:
        """
        Look up a localized string.

        Args:
            key: Resource key, e.g. ``connection.label``

        Returns:
            Localized string

        Raises:
            MissingResourceError: If the bundle has no such key
        """
        try:
            return self._strings[key]
        except KeyError:
            raise MissingResourceError(key, self.name) from None

    def keys(self) -> Iterator[str]:
        return iter(self._strings)

    def __contains__(self, key: object) -> bool:
        return key in self._strings

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return f"ResourceBundle(name={self.name!r}, keys={len(self._strings)})"
