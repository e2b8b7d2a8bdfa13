"""Schemas for health probe endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ProbeStatus = Literal["ok", "alive", "ready", "unavailable"]


class HealthStatus(BaseModel):
    status: ProbeStatus = Field(..., description="Probe result", examples=["ok"])
    service: str = Field(..., description="Service name", examples=["webservice"])
    version: str = Field(..., description="Service version", examples=["1.0.0"])
