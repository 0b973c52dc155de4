# -*- coding: utf-8 -*-
"""Shared Pydantic base for wire models (snake_case in Python, camelCase JSON)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
