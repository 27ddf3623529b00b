"""Pydantic base schema utilities for agent core models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base Pydantic model for all domain schemas.

    Configures common Pydantic behaviors:
    - ``alias_generator=to_camel``: serialize with camelCase keys over the wire.
    - ``populate_by_name=True``: allow initialization by alias or field name.
    - ``extra="forbid"``: prevent unknown fields from slipping into the model.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
