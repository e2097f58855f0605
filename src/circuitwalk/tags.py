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
Description: Parsing and validation of field tags. A tag is a string such as "x,public" made of
            a name followed by comma separated options:
            - public: the field (and everything under it) is a public input.
            - secret: the field (and everything under it) is a secret input.
            - embed: the field name is not added to the names of its children and the
              visibility is left to the children.
            A tag equal to "-" omits the field.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from .meta.constants import ConstantNamespace


class Tags(ConstantNamespace):
    """Tag vocabulary."""

    KEY: str = "gnark"
    PUBLIC: str = "public"
    SECRET: str = "secret"
    EMBED: str = "embed"
    OMIT: str = "-"


# Backslash and quote chars are reserved, but otherwise any punctuation chars are allowed in a
# tag name.
_ALLOWED_PUNCTUATION = frozenset("!#$%&()*+-./:<=>?@[]^_{|}~ ")


class TagOptions(str):
    """The string following the first comma of a tag, or the empty string. It does not include
    the leading comma.
    """

    __slots__ = ()

    def options(self) -> list[str]:
        """The options in declaration order, surrounding whitespace removed."""
        if not self:
            return []
        return [option.strip() for option in self.split(",")]

    def contains(self, option_name: str) -> bool:
        """Reports whether the options contain a particular flag. The flag must match a whole
        comma separated option once its surrounding whitespace is removed.

        Args:
            option_name (str): the flag to look for. Ex.: "public".

        Returns:
            bool: True if the flag is present.
        """
        return option_name in self.options()


class Tag(str):
    """Marker holding a raw tag, to be used as `typing.Annotated` metadata.

    Examples:
        >>> class Circuit:
        ...     x: Annotated[Variable, Tag("x,public")]
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Tag({str.__repr__(self)})"


def parse_tag(tag: str) -> tuple[str, TagOptions]:
    """Split a tag into its name and its comma separated options. No escaping is supported.

    Examples:
        >>> parse_tag("a,b")
        ('a', 'b')
        >>> parse_tag(",public")
        ('', 'public')

    Args:
        tag (str): the raw tag.

    Returns:
        tuple[str, TagOptions]: the name (possibly empty) and the options (possibly empty).
    """
    name, _, options = tag.partition(",")
    return name, TagOptions(options)


def is_valid_tag(name: str) -> bool:
    """Check whether a tag name can be used as a field name.

    A valid name is not empty and only contains letters, digits, spaces and the punctuation
    characters ``!#$%&()*+-./:<=>?@[]^_{|}~``.

    Args:
        name (str): the name to check.

    Returns:
        bool: Whether the name is valid.
    """
    if not name:
        return False
    return all(c in _ALLOWED_PUNCTUATION or c.isalpha() or c.isdecimal() for c in name)
