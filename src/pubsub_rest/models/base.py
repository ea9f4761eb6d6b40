"""Base model for wire-form request and response bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Base model that uses camelCase field aliases to match the Pub/Sub REST API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_body(self) -> dict:
        """Serialize as a JSON request body, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
