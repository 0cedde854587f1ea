"""Form encoding for outbound protocol parameters.

The service parses bodies produced by JavaScript's encodeURIComponent,
so values are quoted with the same unreserved set and pairs keep the
caller's key order.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Union
from urllib.parse import quote

from banter.exceptions import EncodingError

Scalar = str | int | float | bool
ParamValue = Union[Scalar, Sequence[Scalar], Mapping[str, "ParamValue"]]

# Characters encodeURIComponent leaves untouched besides alphanumerics
_UNRESERVED = "-_.!~*'()"


class ValueKind(str, Enum):
    """Kinds of parameter values the codec knows how to encode."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    NESTED = "nested"


def classify_value(key: str, value: object) -> ValueKind:
    """Tag a parameter value with its kind.

    Raises:
        EncodingError: If the value is not a scalar, a flat sequence of
            scalars, or a mapping.
    """
    if isinstance(value, (str, int, float, bool)):
        return ValueKind.SCALAR
    if isinstance(value, Mapping):
        return ValueKind.NESTED
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        for item in value:
            if not isinstance(item, (str, int, float, bool)):
                raise EncodingError(
                    f"Sequence value for {key!r} contains non-scalar item {item!r}",
                    key=key,
                )
        return ValueKind.SEQUENCE
    raise EncodingError(
        f"Cannot encode value of type {type(value).__name__} for {key!r}",
        key=key,
    )


def format_scalar(value: Scalar) -> str:
    """Render a scalar the way the service expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote_component(text: str) -> str:
    """Percent-encode text like encodeURIComponent."""
    return quote(text, safe=_UNRESERVED)


def _encode_pairs(params: Mapping[str, ParamValue], prefix: str = "") -> list[str]:
    pairs: list[str] = []
    for key, value in params.items():
        name = f"{prefix}{key}"
        kind = classify_value(name, value)
        if kind is ValueKind.NESTED:
            # Flattened as outer.inner so nested keys cannot collide
            pairs.extend(_encode_pairs(value, prefix=f"{name}."))  # type: ignore[arg-type]
            continue

        if kind is ValueKind.SCALAR:
            text = format_scalar(value)  # type: ignore[arg-type]
        else:
            text = ",".join(format_scalar(item) for item in value)  # type: ignore[union-attr]
        try:
            pairs.append(f"{name}={quote_component(text)}")
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"Value for {name!r} is not valid UTF-8 text: {e}", key=name
            ) from e
    return pairs


def encode_params(params: Mapping[str, ParamValue]) -> str:
    """Encode a parameter mapping as an application/x-www-form-urlencoded body.

    Scalars become ``key=value``. Sequences are joined with commas and sent
    as one pair. Nested mappings are flattened with a dotted key prefix.
    Pair order follows the mapping's key order.

    Args:
        params: Parameters to encode

    Returns:
        The encoded body

    Raises:
        EncodingError: If any value has an unsupported type
    """
    return "&".join(_encode_pairs(params))
