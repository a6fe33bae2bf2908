"""Query string codec for parameter mappings.

A parameter mapping maps names to either a scalar or a sequence of scalars.
Sequences travel as repeated bracketed keys, so the mapping::

    {"scalarParam": "scalarArg", "vectorParam": [1, 2]}

serializes to::

    ?scalarParam=scalarArg&vectorParam[]=1&vectorParam[]=2
"""

import os
import re
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import unquote

ARRAY_MARKER = "[]"
LOCATION_ENV_VAR = "REQUEST_WORKER_LOCATION"

AddressProvider = Callable[[], str | None]
ParameterMapping = dict[str, str | list[str]]

# Escapes of URI-reserved characters survive decoding, as with a full-URI decode.
_RESERVED_ESCAPE = re.compile(r"(%(?:2[346bcfBCF]|3[abdfABDF]|40))")


def address_from_env() -> str | None:
    """Return the current address from the REQUEST_WORKER_LOCATION env var."""
    return os.environ.get(LOCATION_ENV_VAR)


def serialize(data: Any) -> str:
    """Serialize a parameter mapping into a query string.

    Args:
        data: Mapping of parameter names to scalars or sequences of scalars.
            Anything that is not a mapping (including None) yields "".

    Returns:
        The query string with a leading "?", or "" if there is nothing to send.
        Keys and values are not escaped.
    """
    if not isinstance(data, Mapping):
        return ""

    query = ""
    for parameter, argument in data.items():
        if _is_sequence(argument):
            query += "".join(f"&{parameter}{ARRAY_MARKER}={_stringify(entry)}" for entry in argument)
        else:
            query += f"&{parameter}={_stringify(argument)}"

    return query.replace("&", "?", 1)


def parse(
    source: str | None = None,
    *,
    address_provider: AddressProvider | None = None,
) -> ParameterMapping:
    """Parse a query string into a parameter mapping.

    Args:
        source: Query string, optionally prefixed by a single "?" or "#".
            If None, the query part of the current address is used instead.
        address_provider: Supplies the current address when source is None.
            Defaults to reading the REQUEST_WORKER_LOCATION env var.

    Returns:
        A new dict in the order parameters appear. Bracketed keys collect their
        values into a list under the un-bracketed name; a repeated plain key
        keeps its last value.
    """
    if source is None:
        address = (address_provider or address_from_env)()
        if not address or "?" not in address:
            return {}
        query = address.partition("?")[2]
    elif source[:1] in ("?", "#"):
        query = source[1:]
    else:
        query = source

    params: ParameterMapping = {}
    if not query:
        return params

    for pair in query.split("&"):
        _assign_pair(params, decode_uri(pair))

    return params


def decode_uri(value: str) -> str:
    """Percent-decode a URI component, keeping reserved-character escapes intact."""
    parts = _RESERVED_ESCAPE.split(value)
    # Odd indices hold the reserved escapes captured by the split.
    return "".join(part if index % 2 else unquote(part) for index, part in enumerate(parts))


def _assign_pair(params: ParameterMapping, pair: str) -> None:
    # Fields past the second "=" are dropped.
    key, _, value = pair.partition("=")
    value = value.split("=", 1)[0]
    if not key:
        return

    if key.endswith(ARRAY_MARKER):
        key = key[: -len(ARRAY_MARKER)]
        if not key:
            return
        existing = params.get(key)
        if not isinstance(existing, list):
            existing = []
            params[key] = existing
        existing.append(value)
    else:
        params[key] = value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
