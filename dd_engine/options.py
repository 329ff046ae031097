"""Host-facing selector options."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dd_common.errors import ConfigurationError
from dd_engine.models import Direction


class SelectorOptions(BaseModel):
    """Options accepted from the host, under camelCase or snake_case names."""

    data: list[Any] = Field(default_factory=list, description="The collection")
    sort_fields: list[Any] | None = Field(
        default=None,
        alias="sortFields",
        description='Record sort keys: "field", "field desc" or (field, direction)',
    )
    sort_order: Direction = Field(
        default=Direction.ASC,
        alias="sortOrder",
        description="Direction for primitives, or for the display field",
    )
    display_field: str | None = Field(default=None, alias="displayField")
    value_field: str | None = Field(default=None, alias="valueField")
    identity_fields: list[str] | None = Field(
        default=None,
        alias="identityFields",
        description="Fields that decide record equality",
    )
    key: Callable[[Any], Any] | None = Field(
        default=None, description="Identity extractor; overrides identity_fields"
    )
    default_selection: Any = Field(default=None, alias="defaultSelection")
    sel_reset: bool = Field(default=False, alias="selReset")
    max_selections: int | None = Field(default=None, ge=1, alias="maxSelections")
    is_disabled: bool = Field(default=False, alias="isDisabled")
    on_selection_committed: Callable[[Any], None] | None = Field(
        default=None, alias="onSelectionCommitted"
    )
    label: str = ""
    multiple: bool = False

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    @field_validator("sort_order", mode="before")
    @classmethod
    def _normalize_sort_order(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def has_records(self) -> bool:
        if self.display_field is not None or self.value_field is not None:
            return True
        return bool(self.data) and isinstance(self.data[0], Mapping)


_ALIASES: dict[str, str] = {
    info.alias: name
    for name, info in SelectorOptions.model_fields.items()
    if info.alias
}


def _normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    return {_ALIASES.get(key, key): value for key, value in values.items()}


def _configuration_error(exc: ValidationError) -> ConfigurationError:
    errors = [
        {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
        for err in exc.errors()
    ]
    return ConfigurationError(
        f"Invalid selector options: {errors[0]['loc']}: {errors[0]['msg']}",
        context={"errors": errors},
        cause=exc,
    )


def parse_options(
    options: SelectorOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> SelectorOptions:
    """Build validated options from a model or mapping plus keyword overrides."""
    if isinstance(options, SelectorOptions):
        base = {name: getattr(options, name) for name in SelectorOptions.model_fields}
    else:
        base = _normalize_keys(options or {})
    base.update(_normalize_keys(overrides))
    try:
        return SelectorOptions.model_validate(base)
    except ValidationError as exc:
        raise _configuration_error(exc) from exc


def validate_records(
    data: Sequence[Any],
    display_field: str | None,
    value_field: str | None,
) -> None:
    """Fail fast when records cannot be displayed or identified."""
    if not display_field:
        raise ConfigurationError("display_field must be provided")
    if not value_field:
        raise ConfigurationError("value_field must be provided")
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ConfigurationError(
                f"Item at index {index} is not a record",
                context={"index": index, "item": item},
            )
        for field in (display_field, value_field):
            if not item.get(field):
                raise ConfigurationError.missing_field(index, field)
