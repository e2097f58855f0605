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
Description: Typed field metadata of circuit records. The fields of a record class are resolved
            once into FieldSpec instances, either from a raw tag or from a FieldSpec given
            directly. Tags are read from:
            - dataclass field metadata: field(metadata={"gnark": "x,public"}),
            - Annotated metadata: x: Annotated[Variable, Tag("x,public")] or
              x: Annotated[Variable, FieldSpec(visibility=Visibility.PUBLIC)].
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import NamedTuple

from .meta.typing_utilities import annotation_metadata, class_type_hints, is_classvar
from .tags import Tag, Tags, is_valid_tag, parse_tag
from .visibility import Visibility


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Resolved naming and visibility of a record field.

    Attributes:
        name (str | None): Name contributed to the children names. Empty for embedded fields.
            None means the declared attribute name.
        visibility (Visibility): Visibility of the field, UNSET to let the children decide.
        embed (bool): Whether the field name is elided from the children names. An embedded
            field has an empty name and an UNSET visibility, whatever was given.
        omit (bool): Whether the field is skipped entirely.
    """

    name: str | None = None
    visibility: Visibility = Visibility.SECRET
    embed: bool = False
    omit: bool = False

    def __post_init__(self) -> None:
        if self.embed:
            object.__setattr__(self, "name", "")
            object.__setattr__(self, "visibility", Visibility.UNSET)

    @classmethod
    def untagged(cls, declared_name: str) -> FieldSpec:
        """Spec of a field without tag: its declared name, secret."""
        return cls(name=declared_name)

    @classmethod
    def omitted(cls) -> FieldSpec:
        """Spec of a skipped field."""
        return cls(name="", visibility=Visibility.UNSET, omit=True)

    @classmethod
    def from_tag(cls, tag: str, declared_name: str) -> FieldSpec:
        """Resolve a raw tag.

        The tag name replaces the declared name unless it is invalid (see is_valid_tag).
        Options are checked in priority order: secret, public, then embed.

        Args:
            tag (str): the raw tag. Ex.: "x,public".
            declared_name (str): the attribute name of the field.

        Returns:
            FieldSpec: the resolved spec.
        """
        if tag == Tags.OMIT:
            return cls.omitted()
        if not tag:
            return cls.untagged(declared_name)

        name, options = parse_tag(tag)
        if not is_valid_tag(name):
            name = declared_name

        if options.contains(Tags.SECRET):
            return cls(name=name, visibility=Visibility.SECRET)
        if options.contains(Tags.PUBLIC):
            return cls(name=name, visibility=Visibility.PUBLIC)
        if options.contains(Tags.EMBED):
            return cls(embed=True)
        return cls(name=name, visibility=Visibility.SECRET)

    def resolve(self, declared_name: str) -> FieldSpec:
        """Fill the name of a spec given without one."""
        if self.name is not None:
            return self
        return dataclasses.replace(self, name=declared_name)


class RecordField(NamedTuple):
    """A field of a record class: the attribute to read and its resolved spec."""

    attribute: str
    spec: FieldSpec


def _spec_from_metadata(declared_name: str, metadata: tuple[object, ...]) -> FieldSpec | None:
    for item in metadata:
        if isinstance(item, Tag):
            return FieldSpec.from_tag(item, declared_name)
        if isinstance(item, FieldSpec):
            return item.resolve(declared_name)
    return None


def _dataclass_fields(cls: type) -> tuple[RecordField, ...]:
    hints = class_type_hints(cls)
    fields = []
    for f in dataclasses.fields(cls):
        if Tags.KEY in f.metadata:
            spec = FieldSpec.from_tag(f.metadata[Tags.KEY], f.name)
        else:
            spec = _spec_from_metadata(f.name, annotation_metadata(hints.get(f.name)))
        fields.append(RecordField(f.name, spec or FieldSpec.untagged(f.name)))
    return tuple(fields)


def _named_tuple_fields(cls: type) -> tuple[RecordField, ...]:
    hints = class_type_hints(cls)
    fields = []
    for name in cls._fields:
        spec = _spec_from_metadata(name, annotation_metadata(hints.get(name)))
        fields.append(RecordField(name, spec or FieldSpec.untagged(name)))
    return tuple(fields)


def _annotated_fields(cls: type) -> tuple[RecordField, ...]:
    fields = []
    for name, annotation in class_type_hints(cls).items():
        if is_classvar(annotation):
            continue
        spec = _spec_from_metadata(name, annotation_metadata(annotation))
        fields.append(RecordField(name, spec or FieldSpec.untagged(name)))
    return tuple(fields)


def is_named_tuple(cls: type) -> bool:
    """Whether a class is a typing.NamedTuple or collections.namedtuple class."""
    return issubclass(cls, tuple) and isinstance(getattr(cls, "_fields", None), tuple)


def is_record(cls: type) -> bool:
    """Whether instances of a class are walked field by field. Records are dataclasses, named
    tuples and classes declaring at least one annotated attribute that is not a ClassVar.
    """
    if dataclasses.is_dataclass(cls) or is_named_tuple(cls):
        return True
    return any(not is_classvar(a) for a in class_type_hints(cls).values())


@lru_cache(maxsize=None)
def record_fields(cls: type) -> tuple[RecordField, ...]:
    """Resolve the fields of a record class, in declaration order. Computed once per class.

    Args:
        cls (type): the record class.

    Returns:
        tuple[RecordField, ...]: the fields, omitted ones included.
    """
    if dataclasses.is_dataclass(cls):
        return _dataclass_fields(cls)
    if is_named_tuple(cls):
        return _named_tuple_fields(cls)
    return _annotated_fields(cls)
