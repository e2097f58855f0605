"""
circuitwalk: Declarative discovery of circuit input variables.

This library provides:
- Variable, the single assignment leaf of a circuit
- Tag parsing and validation for field annotations ("x,public", "-", ",embed", ...)
- A walker calling a handler on every variable of a nested record, with its full name and
  its visibility
- A registration handler allocating input wires on a constraint system
"""

__version__ = "0.1.0"
__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from .exceptions import (
    CircuitWalkError,
    CyclicStructureError,
    TracedException,
    UnresolvedAnnotationError,
    UnsetVisibilityError,
    VariableAlreadyAssignedError,
    VariableAlreadyRegisteredError,
    format_exception,
)
from .fields import FieldSpec, RecordField, is_record, record_fields
from .shapes import Shape, ShapeRegistry, shape_registry
from .sink import InputRegistrar, LeafHandler, OpaqueSink, registration_handler
from .tags import Tag, TagOptions, Tags, is_valid_tag, parse_tag
from .variable import UNASSIGNED, Variable
from .visibility import Visibility
from .walker import Walker, append_name, register_inputs, walk

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Leaves
    "Variable",
    "UNASSIGNED",
    "Visibility",
    # Tags
    "Tag",
    "Tags",
    "TagOptions",
    "parse_tag",
    "is_valid_tag",
    "FieldSpec",
    "RecordField",
    "is_record",
    "record_fields",
    # Walking
    "Shape",
    "ShapeRegistry",
    "shape_registry",
    "Walker",
    "walk",
    "append_name",
    # Registration
    "LeafHandler",
    "OpaqueSink",
    "InputRegistrar",
    "registration_handler",
    "register_inputs",
    # Errors
    "TracedException",
    "format_exception",
    "CircuitWalkError",
    "VariableAlreadyAssignedError",
    "VariableAlreadyRegisteredError",
    "UnsetVisibilityError",
    "CyclicStructureError",
    "UnresolvedAnnotationError",
]
