import re
from typing import Any, Literal, Type, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)

# Capital opening a camelCase/PascalCase word, as in "broadcasterUserId".
_WORD_START = re.compile(r"(?:^|(?<=[a-z0-9]))[A-Z](?=[a-z0-9]|$)")


class SerializerOptions(BaseModel):
    """How raw EventSub JSON keys are matched against model fields."""

    model_config = ConfigDict(frozen=True)

    case_insensitive: bool = True
    naming_policy: Literal["snake_case", "camel_case"] = "snake_case"
    strict: bool = False


DEFAULT_SERIALIZER_OPTIONS = SerializerOptions()


def _normalize_key(key: str, options: SerializerOptions) -> str:
    if options.naming_policy == "camel_case":
        key = _WORD_START.sub(
            lambda m: ("_" if m.start() else "") + m.group(0).lower(), key
        )
    if options.case_insensitive:
        key = key.lower()
    return key


def normalize_keys(data: Any, options: SerializerOptions) -> Any:
    """Rewrite every object key in ``data``; values are left untouched."""
    if isinstance(data, dict):
        return {
            _normalize_key(key, options): normalize_keys(value, options)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [normalize_keys(item, options) for item in data]
    return data


def load(json_string: str | bytes, options: SerializerOptions) -> Any:
    data = orjson.loads(json_string)
    if data is None:
        raise ValueError("Parsed JSON cannot be null!")
    return normalize_keys(data, options)


def validate(data: Any, model: Type[T], options: SerializerOptions) -> T:
    """Validate already loaded and normalized JSON data into ``model``."""
    if options.strict:
        # JSON mode, so strict mode still accepts objects for nested models.
        return model.model_validate_json(orjson.dumps(data), strict=True)
    return model.model_validate(data)


def decode(
    json_string: str | bytes,
    model: Type[T],
    options: SerializerOptions = DEFAULT_SERIALIZER_OPTIONS,
) -> T:
    """
    Decode raw JSON into ``model``.

    Raises orjson.JSONDecodeError for malformed JSON, ValueError for a JSON
    ``null`` document and pydantic.ValidationError when the shape does not fit.
    """
    return validate(load(json_string, options), model, options)


def encode(model: BaseModel) -> str:
    return orjson.dumps(model.model_dump(mode="json", exclude_none=True)).decode(
        "utf-8"
    )
