from typing import Any, ClassVar, Dict, FrozenSet
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serialised with camelCase keys; accepts either camelCase or snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelInput(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    # Fields a client may explicitly send as null.
    nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            field for field in self.model_fields_set
            if getattr(self, field) is None and field not in self.nullable
        )
        if nulls:
            raise ValueError(f"null is not allowed for: {', '.join(nulls)}")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields the client actually sent, keyed by store column name."""
        return self.model_dump(exclude_unset=True)
