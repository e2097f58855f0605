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
Created: 2025-12-16
Description: Leaf variable of a circuit. Declaring a Variable in a circuit record does not
            register it. It is registered (given a wire id and a visibility) when the record
            is walked with a registration handler. See circuitwalk.sink.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from typing import Any, Final

from .exceptions import VariableAlreadyAssignedError
from .visibility import Visibility


class _Unassigned:
    """Sentinel type of an unassigned variable value. None is a valid value."""

    def __repr__(self) -> str:
        return "UNASSIGNED"


UNASSIGNED: Final = _Unassigned()


class Variable:
    """Variable of a circuit.

    Attributes:
        is_boolean (bool): Reserved for boolean constrained variables.
        visibility (Visibility): Set by the registrar, UNSET until then.
        id (int | None): Index of the wire in the list of wires of its visibility. Set by the
            registrar, None until then.
    """

    __slots__ = ("is_boolean", "visibility", "id", "_value")

    def __init__(self, value: Any = UNASSIGNED, *, is_boolean: bool = False) -> None:
        self.is_boolean = is_boolean
        self.visibility = Visibility.UNSET
        self.id: int | None = None
        self._value = value

    @property
    def is_assigned(self) -> bool:
        """Whether a value was assigned to the variable."""
        return self._value is not UNASSIGNED

    @property
    def value(self) -> Any:
        """The assigned value, None while unassigned."""
        return None if self._value is UNASSIGNED else self._value

    def assign(self, value: Any) -> None:
        """Assign a value to the variable. A variable can only be assigned once.

        Args:
            value (Any): the value.

        Raises:
            VariableAlreadyAssignedError: Raised if the variable already holds a value.
        """
        if self.is_assigned:
            raise VariableAlreadyAssignedError(
                f"Variable already assigned with {self._value!r}, cannot assign {value!r}."
            )
        self._value = value

    def __repr__(self) -> str:
        return (
            f"Variable(id={self.id!r}, visibility={self.visibility.name}, "
            f"value={self._value!r})"
        )
