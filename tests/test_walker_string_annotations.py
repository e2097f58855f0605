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
Created: 2026-10-19
Description: Tests for the walker on records declared with postponed annotations.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass, field
from typing import Annotated, ClassVar

from circuitwalk.fields import FieldSpec
from circuitwalk.tags import Tag
from circuitwalk.variable import Variable
from circuitwalk.visibility import Visibility
from circuitwalk.walker import walk

PUBLIC = Visibility.PUBLIC
SECRET = Visibility.SECRET


def record(value) -> list[tuple[Visibility, str]]:
    """Walk a value and return the recorded (visibility, name) pairs."""
    calls = []
    walk(value, lambda visibility, name, _: calls.append((visibility, name)))
    return calls


class TestPostponedAnnotations:
    """Test records whose annotations are strings referring to local classes."""

    def test_tags_survive_local_references(self):
        """Test that a local record type does not hide the tags of the other fields."""

        class Inner:
            """Test"""

            y: Annotated[Variable, Tag("y,public")]

            def __init__(self) -> None:
                self.y = Variable()

        class Circuit:
            """Test"""

            x: Annotated[Variable, Tag("X,public")]
            inner: Inner
            count: ClassVar[int] = 0

            def __init__(self) -> None:
                self.x = Variable()
                self.inner = Inner()

        assert record(Circuit()) == [(PUBLIC, "X"), (SECRET, "inner_y")]

    def test_typed_spec_on_local_reference(self):
        """Test a FieldSpec wrapping a local record type in a dataclass."""

        @dataclass
        class Inner:
            """Test"""

            y: Annotated[Variable, Tag("y,public")] = field(default_factory=Variable)
            z: Variable = field(default_factory=Variable)

        @dataclass
        class Circuit:
            """Test"""

            inner: Annotated[Inner, FieldSpec(embed=True)] = field(default_factory=Inner)
            w: Annotated[Variable, FieldSpec("W", Visibility.PUBLIC)] = field(
                default_factory=Variable
            )

        assert record(Circuit()) == [(PUBLIC, "y"), (SECRET, "z"), (PUBLIC, "W")]
