"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2025-12-17
Description: Registry of the shapes the walker knows how to traverse. The set of walkable
            shapes is closed (see Shape); which type has which shape is decided by the
            registry and can be extended with register_shape. For example, to keep the
            walker away from a custom constraint system:
                >>> shape_registry().register_shape(MyConstraintSystem, Shape.SINK)
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Mapping
from enum import IntEnum
from functools import lru_cache
from types import NoneType
from typing import Any

from .fields import is_named_tuple, is_record
from .sink import OpaqueSink
from .variable import Variable


class Shape(IntEnum):
    """How the walker traverses a value.

    IGNORED: Contributes nothing.
    LEAF: A circuit variable, handed to the leaf handler.
    SINK: The owning constraint system. Never walked.
    RECORD: Walked field by field. See circuitwalk.fields.
    SEQUENCE: Walked element by element.
    MAP: Unsupported, a warning is logged.
    """

    IGNORED = 0
    LEAF = 1
    SINK = 2
    RECORD = 3
    SEQUENCE = 4
    MAP = 5


class ShapeRegistry:
    """
    A class to hold the shape of known types. It allows customization.

    Resolution order for a type: the type itself if registered, then its registered bases
    along the MRO, then RECORD for record classes (see is_record), otherwise IGNORED. Named
    tuples are records: the tuple registration does not apply to them.
    """

    __shapes: dict[type, Shape]
    __cache: dict[type, Shape]

    def __init__(self) -> None:
        self.__shapes = {}
        self.__cache = {}

    def clear_cache(self) -> None:
        """Clear the resolved shapes of all types."""
        self.__cache.clear()

    def register_shape(self, cls: type, shape: Shape) -> None:
        """Register the shape of a type. Subclasses share the shape unless registered
        themselves.

        Args:
            cls (type): The type for which the shape is registered.
            shape (Shape): The shape.
        """
        self.__shapes[cls] = Shape(shape)
        self.clear_cache()

    def get_shape(self, cls: type) -> Shape | None:
        """Get the shape registered for exactly this type.

        Args:
            cls (type): The type for which to get the shape.

        Returns:
            Shape | None: The registered shape or None if no shape is registered.
        """
        return self.__shapes.get(cls)

    def has_shape(self, cls: type) -> bool:
        """Check if a shape is registered for exactly this type."""
        return cls in self.__shapes

    def list_registered_types(self) -> list[type]:
        """Get all registered types for debugging/introspection."""
        return list(self.__shapes.keys())

    def __resolve(self, cls: type) -> Shape:
        named_tuple = is_named_tuple(cls)

        # Absolute priority to registered shapes, the most derived first.
        for base in cls.__mro__:
            # Named tuples are records, not tuples, unless a named tuple base is registered.
            if named_tuple and not is_named_tuple(base):
                return Shape.RECORD
            shape = self.__shapes.get(base)
            if shape is not None:
                return shape

        # Virtual subclasses of registered abstract classes. Ex.: MappingProxyType.
        for registered, shape in self.__shapes.items():
            if issubclass(cls, registered):
                return shape

        if is_record(cls):
            return Shape.RECORD
        return Shape.IGNORED

    def shape_of_type(self, cls: type) -> Shape:
        """Get the shape of a type. Cached.

        Args:
            cls (type): The type to resolve.

        Returns:
            Shape: The shape.
        """
        shape = self.__cache.get(cls)
        if shape is None:
            shape = self.__cache[cls] = self.__resolve(cls)
        return shape

    def shape_of(self, value: Any) -> Shape:
        """This function is a shortcut to self.shape_of_type(type(value))."""
        return self.shape_of_type(type(value))


@lru_cache(1)
def shape_registry() -> ShapeRegistry:
    """Default shape registry. Allows to register custom shapes.
    See ShapeRegistry for more information.

    Returns:
        ShapeRegistry: the shape registry instance.
    """
    registry = ShapeRegistry()
    registry.register_shape(Variable, Shape.LEAF)
    registry.register_shape(OpaqueSink, Shape.SINK)
    registry.register_shape(list, Shape.SEQUENCE)
    registry.register_shape(tuple, Shape.SEQUENCE)
    registry.register_shape(dict, Shape.MAP)
    registry.register_shape(Mapping, Shape.MAP)
    # Sequences of characters and scalars are never walked.
    for scalar in (str, bytes, bytearray, int, float, complex, bool, NoneType):
        registry.register_shape(scalar, Shape.IGNORED)
    return registry
