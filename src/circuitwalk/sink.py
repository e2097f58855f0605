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
Description: The registration side of the walker: the leaf handler contract, the opaque sink
            base class and a handler registering leaves on an InputRegistrar.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Callable, Protocol

from .exceptions import UnsetVisibilityError, VariableAlreadyRegisteredError
from .variable import Variable
from .visibility import Visibility

type LeafHandler = Callable[[Visibility, str, Variable], None]


class OpaqueSink:
    """Base class of the objects owning the wires, typically a constraint system. A circuit
    record can hold a reference to its sink: the walker never goes through it.
    """


class InputRegistrar(Protocol):
    """Allocates input wires. Returns the index of the new wire in the list of wires of the
    same visibility.
    """

    def new_public_variable(self, name: str) -> int: ...

    def new_secret_variable(self, name: str) -> int: ...


def registration_handler(registrar: InputRegistrar) -> LeafHandler:
    """Create a leaf handler allocating a wire on the registrar for every leaf and recording
    the wire id and the visibility on the leaf.

    Args:
        registrar (InputRegistrar): the wire allocator.

    Returns:
        LeafHandler: the handler to give to the walker.
    """

    def handler(visibility: Visibility, name: str, variable: Variable) -> None:
        if variable.id is not None:
            raise VariableAlreadyRegisteredError(
                f"Variable '{name}' is already registered as wire {variable.id}."
            )
        match visibility:
            case Visibility.PUBLIC:
                variable.id = registrar.new_public_variable(name)
            case Visibility.SECRET:
                variable.id = registrar.new_secret_variable(name)
            case _:
                raise UnsetVisibilityError(f"Cannot register '{name}': visibility is unset.")
        variable.visibility = visibility

    return handler
