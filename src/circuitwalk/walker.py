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
Description: Depth first walk of a circuit record. Every Variable found is handed to a leaf
            handler with its full name and its visibility:
            - names are the field names (or tag names) joined with "_", sequence elements
              are named by their index,
            - fields are secret by default, tags can make them public,
            - a visibility given by a parent always wins over the children ones.
            The first error raised stops the walk and is propagated unchanged.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import logging
from typing import Any

from .exceptions import CyclicStructureError, UnsetVisibilityError
from .fields import record_fields
from .shapes import Shape, ShapeRegistry, shape_registry
from .sink import InputRegistrar, LeafHandler, registration_handler
from .visibility import Visibility

logger = logging.getLogger(__name__)

_MISSING = object()


def append_name(base_name: str, name: str) -> str:
    """Join a child name to the name of its parent.

    Examples:
        >>> append_name("", "x")
        'x'
        >>> append_name("a", "x")
        'a_x'
        >>> append_name("a", "") # embedded field
        'a'
    """
    if not base_name:
        return name
    if not name:
        return base_name
    return f"{base_name}_{name}"


class Walker:
    """Walks values according to the shapes of a registry."""

    def __init__(self, registry: ShapeRegistry | None = None) -> None:
        self.registry = registry or shape_registry()

    def walk(
        self,
        value: Any,
        handler: LeafHandler,
        base_name: str = "",
        visibility: Visibility = Visibility.UNSET,
    ) -> None:
        """Call the handler on every leaf variable reachable from the value.

        Args:
            value (Any): the root. Usually a circuit record.
            handler (LeafHandler): called with (visibility, full name, variable) for each leaf,
                in declaration order.
            base_name (str): prefix of every name.
            visibility (Visibility): visibility forced on the whole value. UNSET lets the
                fields decide.

        Raises:
            UnsetVisibilityError: Raised when a leaf is reached without visibility.
            CyclicStructureError: Raised when a container contains itself.
            Exception: Anything raised by the handler, unchanged.
        """
        self.__walk(value, base_name, Visibility(visibility), handler, set())

    def __walk(
        self,
        value: Any,
        base_name: str,
        visibility: Visibility,
        handler: LeafHandler,
        path: set[int],
    ) -> None:
        match self.registry.shape_of(value):
            case Shape.LEAF:
                if not visibility.is_set():
                    raise UnsetVisibilityError(
                        f"Variable '{base_name}' has no visibility. Tag it public or secret"
                        " instead of embedding it."
                    )
                logger.debug("found %s variable %r", visibility.name.lower(), base_name)
                handler(visibility, base_name, value)
            case Shape.RECORD:
                with _Visiting(path, value, base_name):
                    self.__walk_record(value, base_name, visibility, handler, path)
            case Shape.SEQUENCE:
                if len(value) == 0:
                    logger.warning(
                        "got uninitialized sequence (or empty tuple) at %r, ignoring", base_name
                    )
                    return
                with _Visiting(path, value, base_name):
                    for index, element in enumerate(value):
                        self.__walk(
                            element, append_name(base_name, str(index)), visibility, handler, path
                        )
            case Shape.MAP:
                logger.warning("map values are not addressable, ignoring %r", base_name)
            case Shape.SINK | Shape.IGNORED:
                return

    def __walk_record(
        self,
        value: Any,
        base_name: str,
        parent_visibility: Visibility,
        handler: LeafHandler,
        path: set[int],
    ) -> None:
        for attribute, spec in record_fields(type(value)):
            if spec.omit:
                continue

            # parent visibility overrides
            visibility = parent_visibility if parent_visibility.is_set() else spec.visibility

            # an attribute never set on the instance has nothing to walk
            child = getattr(value, attribute, _MISSING)
            if child is _MISSING:
                continue

            self.__walk(child, append_name(base_name, spec.name), visibility, handler, path)


class _Visiting:
    """Marks a container as being walked for the duration of a with block."""

    def __init__(self, path: set[int], value: Any, name: str) -> None:
        self.path = path
        self.key = id(value)
        self.name = name

    def __enter__(self) -> None:
        if self.key in self.path:
            raise CyclicStructureError(f"'{self.name or '<root>'}' contains itself.")
        self.path.add(self.key)

    def __exit__(self, *_: Any) -> None:
        self.path.discard(self.key)


def walk(
    value: Any,
    handler: LeafHandler,
    base_name: str = "",
    visibility: Visibility = Visibility.UNSET,
) -> None:
    """This function is a shortcut to `Walker().walk()` with the default shape registry."""
    Walker().walk(value, handler, base_name, visibility)


def register_inputs(
    circuit: Any, registrar: InputRegistrar, registry: ShapeRegistry | None = None
) -> None:
    """Register every leaf variable of a circuit as an input wire of the registrar.

    Args:
        circuit (Any): the circuit record.
        registrar (InputRegistrar): the wire allocator, usually the constraint system.
        registry (ShapeRegistry | None): the shapes to use, the default ones if None.
    """
    Walker(registry).walk(circuit, registration_handler(registrar))
