# -*- coding: utf-8 -*-
"""Shared Pydantic bases and small response envelopes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON uses camelCase keys; Python code keeps snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreatedResponse(CamelModel):
    success: bool = True
    id: str


class SuccessResponse(CamelModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str
