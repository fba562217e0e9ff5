"""
Document base model — typed decoding with defaults for externally owned JSON.

Every data file this backend reads is written by the monitoring service, so no
shape can be trusted. ExternalDocument gives each document a typed model where:

  - a non-object input decodes to the all-defaults model
  - a field whose JSON type does not match decodes to that field's default
  - unknown keys are ignored

Field types use the strict aliases below so that JSON numbers are never
coerced to strings and booleans are never accepted as integers.

Import hierarchy (no circular dependencies):
  document.py       <- no internal imports
  ticket.py         <- document.py
  health.py         <- document.py
  ipc.py            <- no internal imports
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)


def _expect_type(*types: type) -> BeforeValidator:
    def check(value: Any) -> Any:
        # bool is an int subclass; only accept it where it is asked for by name
        if isinstance(value, bool) and bool not in types:
            raise ValueError("boolean where a number or string was expected")
        if not isinstance(value, types):
            raise ValueError(f"expected {', '.join(t.__name__ for t in types)}")
        return value

    return BeforeValidator(check)


Text = Annotated[str, _expect_type(str)]
Count = Annotated[int, _expect_type(int)]
Number = Annotated[float, _expect_type(int, float)]
JsonObject = Annotated[dict[str, Any], _expect_type(dict)]
JsonArray = Annotated[list[Any], _expect_type(list)]


class ExternalDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _require_object(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        return data if isinstance(data, dict) else {}

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_mismatch(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
