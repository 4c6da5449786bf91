"""Rendering of arbitrary logged values into display text.

Values fall into a closed set of kinds: plain text, primitives, composite
containers and opaque objects. Each kind has its own renderer, and every
renderer is total: if a value's own ``repr`` fails, a generic
``<TypeName object at 0x...>`` rendering is used instead.
"""

import enum
import pprint
from collections.abc import Callable
from dataclasses import dataclass
from functools import singledispatch


class ValueKind(enum.Enum):
    """Kind of a logged value, deciding how it is rendered."""

    TEXT = "text"
    PRIMITIVE = "primitive"
    COMPOSITE = "composite"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class Description:
    """Display text of a value together with its kind."""

    text: str
    kind: ValueKind

    @property
    def is_text(self) -> bool:
        """True when the value was a plain string passed through as-is."""
        return self.kind is ValueKind.TEXT


def _fallback_repr(value: object) -> str:
    return object.__repr__(value)


def _safe(render: Callable[[object], str], value: object) -> str:
    try:
        text = render(value)
    except Exception:
        return _fallback_repr(value)
    return text or _fallback_repr(value)


@singledispatch
def describe(value: object) -> Description:
    """Render any value as display text.

    Args:
        value: The value to render.

    Returns:
        Description with the rendered text and the value's kind.
    """
    return Description(_safe(repr, value), ValueKind.OPAQUE)


@describe.register(str)
def _describe_text(value: str) -> Description:
    return Description(value, ValueKind.TEXT)


@describe.register(type(None))
@describe.register(int)
@describe.register(float)
@describe.register(complex)
@describe.register(bytes)
def _describe_primitive(value: object) -> Description:
    return Description(_safe(repr, value), ValueKind.PRIMITIVE)


@describe.register(dict)
@describe.register(list)
@describe.register(tuple)
@describe.register(set)
@describe.register(frozenset)
def _describe_composite(value: object) -> Description:
    return Description(_safe(pprint.pformat, value), ValueKind.COMPOSITE)
