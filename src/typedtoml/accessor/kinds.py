# topmark:header:start
#
#   project      : TypedToml
#   file         : kinds.py
#   file_relpath : src/typedtoml/accessor/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Caller scalar kinds accepted by the typed accessors.

The set is closed: six module-level constants, each mapping a caller-visible
result type onto exactly one document [`NodeKind`][typedtoml.document.model.NodeKind]:

| Kind   | Node kind | Result  | Conversion                                   |
|--------|-----------|---------|----------------------------------------------|
| `BOOL` | BOOL      | `bool`  | none                                         |
| `I32`  | INTEGER   | `int`   | two's-complement truncation to 32 bits       |
| `I64`  | INTEGER   | `int`   | none                                         |
| `F32`  | FLOAT     | `float` | IEEE round-to-nearest narrowing to binary32  |
| `F64`  | FLOAT     | `float` | none                                         |
| `TEXT` | STRING    | `str`   | none                                         |

Matching is strict: a node matches a kind iff its node kind is the one the kind
maps to. There is no Integer/Float, Bool/Integer or String/number coercion.

`I32` truncation and `F32` narrowing are silent; they are not reported as
mismatches.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

from typedtoml.document.model import NodeKind, ScalarNode

if TYPE_CHECKING:
    from collections.abc import Callable

    from typedtoml.document.model import TomlNode

T = TypeVar("T")

_INT32_SPAN: Final[int] = 2**32
_INT32_MIN: Final[int] = -(2**31)
_F32: Final[struct.Struct] = struct.Struct("<f")


def truncate_i32(value: int) -> int:
    """Truncate ``value`` to a signed 32-bit integer (two's complement wrap)."""
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def narrow_f32(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 binary32 value.

    Finite values beyond the binary32 range become infinities of the same sign.
    """
    try:
        return float(_F32.unpack(_F32.pack(value))[0])
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class ScalarKind(Generic[T]):
    """A caller-visible scalar type and the node kind it reads."""

    name: str
    node_kind: NodeKind
    _convert: Callable[[Any], T]

    def matches(self, node: TomlNode | None) -> bool:
        """Return True if ``node`` is a scalar of this kind's node kind."""
        return isinstance(node, ScalarNode) and node.kind is self.node_kind

    def convert(self, node: ScalarNode) -> T:
        """Convert a matching node's payload to the caller type.

        The node must satisfy [`matches`][typedtoml.accessor.kinds.ScalarKind.matches].
        """
        return self._convert(node.value)

    @property
    def type_name(self) -> str:
        """Human-readable node kind name used in error messages."""
        return _TYPE_NAMES[self.node_kind]

    def __repr__(self) -> str:
        return f"ScalarKind({self.name})"


_TYPE_NAMES: Final[dict[NodeKind, str]] = {
    NodeKind.BOOL: "bool",
    NodeKind.INTEGER: "integer",
    NodeKind.FLOAT: "floating-point",
    NodeKind.STRING: "string",
}

BOOL: Final[ScalarKind[bool]] = ScalarKind("BOOL", NodeKind.BOOL, bool)
I32: Final[ScalarKind[int]] = ScalarKind("I32", NodeKind.INTEGER, truncate_i32)
I64: Final[ScalarKind[int]] = ScalarKind("I64", NodeKind.INTEGER, int)
F32: Final[ScalarKind[float]] = ScalarKind("F32", NodeKind.FLOAT, narrow_f32)
F64: Final[ScalarKind[float]] = ScalarKind("F64", NodeKind.FLOAT, float)
TEXT: Final[ScalarKind[str]] = ScalarKind("TEXT", NodeKind.STRING, str)

SCALAR_KINDS: Final[tuple[ScalarKind[Any], ...]] = (BOOL, I32, I64, F32, F64, TEXT)


def kind_from_name(name: str) -> ScalarKind[Any] | None:
    """Return the scalar kind called ``name`` (case-insensitive), or ``None``."""
    target: str = name.strip().upper()
    for kind in SCALAR_KINDS:
        if kind.name == target:
            return kind
    return None
