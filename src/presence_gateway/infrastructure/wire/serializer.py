from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from presence_gateway.application.exceptions import DecodeError, EncodeError, MissingFieldError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def deserialize_payload(raw: str | bytes) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"payload is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError(f"payload must be a JSON object, got {type(data).__name__}")
    return data


def decode_model(model_type: type[M], data: Mapping[str, Any] | str | bytes) -> M:
    """Validate wire data into ``model_type``.

    Raises :class:`MissingFieldError` when a required field is absent and
    :class:`DecodeError` for any other shape mismatch.
    """
    if isinstance(data, (str, bytes)):
        data = deserialize_payload(data)
    try:
        return model_type.model_validate(data)
    except PydanticValidationError as exc:
        raise _translate(model_type, exc) from exc


def encode_model(model: BaseModel) -> dict[str, Any]:
    """Wire form of ``model``.

    Use this rather than ``model_dump``: a value with no wire form (an
    ``UNKNOWN`` activity kind) surfaces here as :class:`EncodeError` instead of
    pydantic's serialization error.
    """
    try:
        return model.model_dump(mode="json", by_alias=True)
    except PydanticSerializationError as exc:
        raise EncodeError(f"cannot encode {type(model).__name__}: {exc}") from exc


def serialize_model(model: BaseModel) -> str:
    return json.dumps(encode_model(model))


def _translate(model_type: type[BaseModel], exc: PydanticValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    missing = [_loc(error) for error in errors if error["type"] == "missing"]
    if missing:
        logger.debug("%s payload missing %s", model_type.__name__, ", ".join(missing))
        return MissingFieldError(f"{model_type.__name__}: missing required field(s): {', '.join(missing)}")

    details = "; ".join(f"{_loc(error)}: {error['msg']}" for error in errors)
    return DecodeError(f"{model_type.__name__}: {details}")


def _loc(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error["loc"]) or "<root>"
