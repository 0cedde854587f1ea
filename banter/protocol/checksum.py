"""Request checksum (the icognocheck field).

The server recomputes an MD5 over a fixed window of the encoded body and
rejects requests whose icognocheck does not match. It is a format token,
not a security control.
"""

import hashlib
from collections.abc import Mapping
from typing import Final

from banter.exceptions import EncodingError
from banter.protocol.codec import ParamValue, encode_params

# Window of the encoded body, computed before the checksum is inserted
CHECKSUM_SLICE: Final = slice(9, 35)


def digest(data: str) -> str:
    """Return the lowercase hex MD5 digest of a string's UTF-8 bytes.

    Raises:
        EncodingError: If the string holds lone surrogates
    """
    try:
        raw = data.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot hash non-UTF-8 text: {e}") from e
    return hashlib.md5(raw).hexdigest()


def checksum_window(encoded: str) -> str:
    """Return the part of an encoded body covered by the checksum."""
    return encoded[CHECKSUM_SLICE]


def compute_checksum(params: Mapping[str, ParamValue]) -> str:
    """Compute the icognocheck value for a parameter mapping.

    Args:
        params: Request parameters in wire order, without a fresh checksum

    Returns:
        32-character hex digest
    """
    return digest(checksum_window(encode_params(params)))
