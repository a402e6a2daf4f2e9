"""JSON payload decoding backed by pydantic type adapters."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Type, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import from_json

from casebook.shared_kernel.capabilities import Decoder, Payload, T
from casebook.shared_kernel.entity import Entity
from casebook.shared_kernel.exceptions import DecodeError

# Identity is assigned by the stamper or carried over from the store, never
# taken from a client payload.
SERVER_OWNED_FIELDS = frozenset({"identity"})


@lru_cache(maxsize=None)
def _adapter(entity_type: type) -> TypeAdapter:
    return TypeAdapter(entity_type)


def _read(data: Payload) -> Union[bytes, str]:
    if isinstance(data, (bytes, str)):
        return data
    return data.read()


def _pydantic_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    return [
        {"loc": ".".join(str(part) for part in error["loc"]), "msg": error["msg"]}
        for error in exc.errors()
    ]


class JsonDecoder(Decoder):
    """Decode JSON objects into entity dataclasses.

    Unknown keys and any client-supplied ``identity`` are dropped before
    validation. Unreadable streams, malformed JSON and type mismatches raise
    DecodeError with the offending locations in ``details``.
    """

    def decode(self, entity_type: Type[T], data: Payload) -> T:
        name = entity_type.__name__
        try:
            parsed = from_json(_read(data))
        except (ValueError, OSError) as exc:
            # UnicodeDecodeError is a ValueError
            raise DecodeError(
                f"malformed {name} payload",
                details={"errors": [{"loc": "", "msg": str(exc)}]},
            ) from exc

        if isinstance(parsed, dict):
            parsed = {key: value for key, value in parsed.items() if key not in SERVER_OWNED_FIELDS}

        try:
            return _adapter(entity_type).validate_python(parsed)
        except PydanticValidationError as exc:
            raise DecodeError(
                f"invalid {name} payload",
                details={"errors": _pydantic_errors(exc)},
            ) from exc

    def encode(self, entity: Entity) -> bytes:
        return _adapter(type(entity)).dump_json(entity)

    def to_dict(self, entity: Entity) -> Dict[str, Any]:
        return _adapter(type(entity)).dump_python(entity, mode="json")
