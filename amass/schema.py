"""
Pydantic interop for amass.

Provides validate_model(), validate_value() and validate_fields(), which
turn pydantic validation errors into accumulated failures.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import AliasChoices, AliasPath, BaseModel, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from .collect import map_n
from .context import is_strict
from .logging import logger
from .nel import NonEmptyList
from .types import Err, Ok, ResultNel

_ModelT = TypeVar("_ModelT", bound=BaseModel)

Loc = tuple[str | int, ...]


@dataclass(frozen=True, slots=True)
class FieldError:
    """One validation error reported by pydantic."""

    loc: Loc
    message: str
    input: Any = None

    @property
    def path(self) -> str:
        return ".".join(str(part) for part in self.loc)


def _to_errors(e: ValidationError, loc: Loc = ()) -> NonEmptyList[FieldError]:
    return NonEmptyList.from_iterable(
        FieldError(
            loc=(*loc, *error["loc"]),
            message=error["msg"],
            input=error.get("input"),
        )
        for error in e.errors()
    )


def validate_model(
    model: type[_ModelT], data: Any
) -> ResultNel[FieldError, _ModelT]:
    """
    Validate data into a Pydantic model.

    Args:
        model: The BaseModel subclass to build
        data: Mapping (or object) to validate

    Returns:
        Ok(instance) if validation passes
        Err(NonEmptyList[FieldError]) if validation fails

    Raises:
        ValidationError: In strict mode, instead of returning Err
    """
    try:
        return Ok(model.model_validate(data))
    except ValidationError as e:
        if is_strict():
            raise
        logger.debug("%s: %d validation error(s)", model.__name__, e.error_count())
        return Err(_to_errors(e))


def validate_value(tp: Any, value: Any, loc: Loc = ()) -> ResultNel[FieldError, Any]:
    """
    Validate a single value against a type.

    Usage:
        validate_value(int, "3")              # Ok(3)
        validate_value(int, "x", loc=("age",))  # Err(NonEmptyList(FieldError(("age",), ...)))
    """
    try:
        return Ok(TypeAdapter(tp).validate_python(value))
    except ValidationError as e:
        if is_strict():
            raise
        return Err(_to_errors(e, loc))


def _field_keys(name: str, info: FieldInfo) -> set[str | int]:
    """Every input key pydantic may report a field's errors under."""
    keys: set[str | int] = {name}
    if info.alias:
        keys.add(info.alias)
    va = info.validation_alias
    choices = va.choices if isinstance(va, AliasChoices) else [va]
    for choice in choices:
        if isinstance(choice, str):
            keys.add(choice)
        elif isinstance(choice, AliasPath) and choice.path:
            keys.add(choice.path[0])
    return keys


def validate_fields(
    model: type[_ModelT], data: Any
) -> ResultNel[FieldError, _ModelT]:
    """
    Validate data into a model, reporting errors grouped field by field.

    Validation is the model's own (field validators, aliases, extra policy
    and model validators all apply), so the outcome agrees with
    validate_model. On failure the errors are regrouped per declared field
    and accumulated in field-declaration order; errors that belong to no
    field (extra inputs, model-level validators) come last.

    Usage:
        class User(BaseModel):
            name: str = Field(min_length=1)
            age: int = Field(ge=0)

        validate_fields(User, {"age": -1, "name": ""})
        # Err(NonEmptyList(FieldError(("name",), ...), FieldError(("age",), ...)))
    """
    result = validate_model(model, data)
    if result.is_ok():
        return result

    fields = list(model.model_fields.items())
    owner = {
        key: index
        for index, (name, info) in enumerate(fields)
        for key in _field_keys(name, info)
    }
    rest = len(fields)
    groups: list[list[FieldError]] = [[] for _ in range(rest + 1)]
    for error in result.error:
        index = owner.get(error.loc[0], rest) if error.loc else rest
        groups[index].append(error)

    per_field = [
        Err(NonEmptyList.from_iterable(group)) if group else Ok(None)
        for group in groups
    ]
    return map_n(lambda *_: None, *per_field, combine=operator.add)
