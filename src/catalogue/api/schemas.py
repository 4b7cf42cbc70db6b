"""Pydantic schemas shared by the web shell and the management CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProductSeed(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Widget",
                    "price": 5.0,
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, ge=0.0, allow_inf_nan=False)


class HealthResponse(BaseModel):
    status: str = "ok"
    domain: str
