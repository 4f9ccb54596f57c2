"""
Defines the boundary types for attributed Gerber objects.

The Gerber command parser is an external collaborator. It hands over
graphical objects (flashes, draws, regions) together with the object
attributes (``%TO...*%``) in effect when each object was created. This
module describes that contract; ``AttributedObject`` is the plain record
used by adapters and tests.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Iterable, Protocol

__all__ = [
    "Attribute",
    "AttributeDictionary",
    "GraphicalObject",
    "AttributedObject",
    "GerberSource",
    "PIN_ATTRIBUTE",
    "NET_ATTRIBUTE",
    "NO_CONNECT",
]

PIN_ATTRIBUTE = ".P"
NET_ATTRIBUTE = ".N"
NO_CONNECT = "N/C"


@dataclass(slots=True, frozen=True)
class Attribute:
    """
    A named, multi-valued Gerber attribute.

    Example: ``%TO.P,U3,14*%`` -> Attribute(".P", ("U3", "14"))

    :param name: Attribute name including the leading dot for standard ones.
    :param values: Ordered attribute values.
    """

    name: str
    values: tuple[str, ...] = field(default_factory=tuple)

    @property
    def first(self) -> str | None:
        """The first value, or None when the attribute has no values."""
        return self.values[0] if self.values else None


class AttributeDictionary(Mapping[str, Attribute]):
    """Read-only attribute lookup keyed by attribute name."""

    __slots__ = ("_attributes",)

    def __init__(self, attributes: Iterable[Attribute] = ()):
        self._attributes = {attribute.name: attribute for attribute in attributes}

    @classmethod
    def of(cls, values: Mapping[str, Iterable[str]]) -> "AttributeDictionary":
        """
        Builds a dictionary from plain name -> values pairs.

        :param values: Mapping such as ``{".P": ["U3", "14"], ".N": ["GND"]}``.
        :return: New AttributeDictionary.
        """
        return cls(Attribute(name, tuple(attr_values)) for name, attr_values in values.items())

    def get_attribute(self, name: str) -> Attribute | None:
        """
        Typed lookup of a single attribute.

        :param name: Attribute name (e.g. '.P').
        :return: The attribute, or None when the object does not carry it.
        """
        return self._attributes.get(name)

    def __getitem__(self, name: str) -> Attribute:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._attributes.values())!r})"


class GraphicalObject(Protocol):
    """Anything produced by the Gerber parser that exposes its object attributes."""

    @property
    def attributes(self) -> AttributeDictionary:
        """Attributes attached to this object."""


class GerberSource(Protocol):
    """Protocol for the external Gerber parser."""

    def objects(self) -> Iterable[GraphicalObject]:
        """Parse the Gerber file and return its graphical object stream."""


@dataclass(slots=True, frozen=True)
class AttributedObject:
    """
    Minimal graphical object record.

    :param attributes: Object attributes in effect for this object.
    :param kind: Free-form object kind (e.g. 'flash', 'draw', 'region').
    """

    attributes: AttributeDictionary = field(default_factory=AttributeDictionary)
    kind: str = "flash"
