"""Cassette entry schema.

One entry is a request/response pair::

    - request:
        method: get
        path: /users?id=1
        headers:
          Accept: application/json
      response:
        status: 200
        headers:
          Content-Type: application/json
        body: '{"id": 1}'

Validation happens while converting the loaded YAML into these frozen
dataclasses; anything that does not fit raises ``CassetteError``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from webmock.errors import CassetteError

@dataclass(frozen=True, slots=True)
class CassetteRequest:
    method: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CassetteResponse:
    status: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


@dataclass(frozen=True, slots=True)
class CassetteEntry:
    request: CassetteRequest
    response: CassetteResponse


_NULLS = frozenset({"", "~", "null", "Null", "NULL"})


def _is_unset(value: Any) -> bool:
    # Scalars load as text, so ``status:`` and ``status: null`` arrive as strings
    return value is None or (isinstance(value, str) and value in _NULLS)


def _header_map(value: Any, where: str, source: str) -> dict[str, str]:
    if _is_unset(value):
        return {}
    if not isinstance(value, Mapping):
        raise CassetteError(source, f"{where}: headers must be a mapping")
    headers: dict[str, str] = {}
    for name, item in value.items():
        if not isinstance(item, str):
            raise CassetteError(source, f"{where}: header {name!r} must be a scalar value")
        headers[name] = item
    return headers


def _section(entry: Mapping[str, Any], key: str, where: str, source: str) -> Mapping[str, Any]:
    value = entry.get(key)
    if _is_unset(value):
        return {}
    if not isinstance(value, Mapping):
        raise CassetteError(source, f"{where}: {key!r} must be a mapping")
    return value


def _status(value: Any, where: str, source: str) -> int:
    if _is_unset(value):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CassetteError(source, f"{where}: response.status must be an integer") from None


def parse_entry(entry: Any, index: int, source: str) -> CassetteEntry:
    """Validate one raw YAML entry and convert it to a ``CassetteEntry``.

    *entry* comes from a YAML load that keeps scalars as text, so header
    values and the body are copied exactly as written in the file.
    """
    where = f"entry {index}"
    if not isinstance(entry, Mapping):
        raise CassetteError(source, f"{where}: expected a mapping with 'request' and 'response'")

    request = _section(entry, "request", where, source)
    response = _section(entry, "response", where, source)

    method = request.get("method")
    path = request.get("path")
    if not isinstance(method, str) or not method:
        raise CassetteError(source, f"{where}: request.method is required")
    if not isinstance(path, str) or not path:
        raise CassetteError(source, f"{where}: request.path is required")

    body = response.get("body")
    if _is_unset(body):
        body = ""
    if not isinstance(body, str):
        raise CassetteError(source, f"{where}: response.body must be a scalar, not a collection")

    return CassetteEntry(
        request=CassetteRequest(
            method=method.upper(),
            path=path,
            headers=_header_map(request.get("headers"), f"{where} request", source),
        ),
        response=CassetteResponse(
            status=_status(response.get("status"), where, source),
            headers=_header_map(response.get("headers"), f"{where} response", source),
            body=body,
        ),
    )
