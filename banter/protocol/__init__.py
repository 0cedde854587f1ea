"""Wire protocol for the webservicemin endpoint.

Parameter encoding, request checksum, session cookies and positional
response decoding.
"""

from banter.protocol.checksum import CHECKSUM_SLICE, compute_checksum, digest
from banter.protocol.codec import ParamValue, ValueKind, classify_value, encode_params
from banter.protocol.cookies import CookieJar
from banter.protocol.schema import (
    REQUEST_DEFAULTS,
    RESPONSE_SCHEMA,
    SKIP,
    default_params,
)

__all__ = [
    "CHECKSUM_SLICE",
    "REQUEST_DEFAULTS",
    "RESPONSE_SCHEMA",
    "SKIP",
    "CookieJar",
    "ParamValue",
    "ValueKind",
    "classify_value",
    "compute_checksum",
    "default_params",
    "digest",
    "encode_params",
]
