"""Visibility of circuit input variables."""

from enum import IntEnum


class Visibility(IntEnum):
    """Visibility of a circuit input.

    UNSET: No visibility decided yet. Lets the parent (or the child, for embedded fields)
        decide. A leaf must never be registered with it.
    SECRET: The input is only known to the prover.
    PUBLIC: The input is shared with the verifier.
    """

    UNSET = 0
    SECRET = 1
    PUBLIC = 2

    def is_set(self) -> bool:
        """Whether the visibility is resolved, i.e. not UNSET."""
        return self is not Visibility.UNSET
