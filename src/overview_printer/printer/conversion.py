"""Conversion between unstructured dicts and kubernetes SDK models."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from kubernetes.client import ApiClient, Configuration
from kubernetes.client import models as k8s_models

_LIST_TYPE = re.compile(r"^list\[(.*)\]$")
_DICT_TYPE = re.compile(r"^dict\(([^,]*), (.*)\)$")
_PRIMITIVES: dict[str, type] = {"str": str, "int": int, "float": float, "bool": bool}


def _lenient_configuration() -> Configuration:
    configuration = Configuration()
    configuration.client_side_validation = False
    return configuration


def to_typed(obj: dict[str, Any], model: str) -> Any:
    """Build an SDK model (e.g. ``"V1Pod"``) from an unstructured object.

    Fields absent from ``obj`` stay ``None`` on the model, including fields
    the API marks as required, so partial objects can still be rendered.

    Raises:
        ValueError: If a value has the wrong shape for its field, e.g. a list
            where an object is expected or an unparsable timestamp.
    """
    return _build(obj, model, _lenient_configuration())


def _build(data: Any, type_name: str, configuration: Configuration) -> Any:
    if data is None:
        return None

    list_match = _LIST_TYPE.match(type_name)
    if list_match:
        if not isinstance(data, list):
            raise ValueError(f"expected a list for {type_name}, got {type(data).__name__}")
        return [_build(item, list_match.group(1), configuration) for item in data]

    dict_match = _DICT_TYPE.match(type_name)
    if dict_match:
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping for {type_name}, got {type(data).__name__}")
        return {k: _build(v, dict_match.group(2), configuration) for k, v in data.items()}

    if type_name == "object":
        return data
    if type_name == "datetime":
        return _parse_datetime(data)
    if type_name == "date":
        return data if isinstance(data, date) else date.fromisoformat(str(data))
    if type_name in _PRIMITIVES:
        try:
            return _PRIMITIVES[type_name](data)
        except TypeError as e:
            raise ValueError(f"invalid {type_name} value {data!r}") from e

    klass = getattr(k8s_models, type_name)
    if not isinstance(data, dict):
        raise ValueError(f"expected an object for {type_name}, got {type(data).__name__}")
    kwargs = {
        attr: _build(data[key], klass.openapi_types[attr], configuration)
        for attr, key in klass.attribute_map.items()
        if key in data
    }
    return klass(local_vars_configuration=configuration, **kwargs)


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def to_unstructured(obj: Any) -> dict[str, Any]:
    """Serialize an SDK model into its camelCase dict form."""
    with ApiClient() as api_client:
        result: dict[str, Any] = api_client.sanitize_for_serialization(obj)
    return result


def group_version(api_version: str | None) -> tuple[str, str]:
    """Split ``apiVersion`` into (group, version); the core group is ``""``."""
    if not api_version:
        return "", ""
    group, _, version = api_version.rpartition("/")
    return group, version
