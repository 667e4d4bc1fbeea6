"""Shared response models."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class HealthCheckResponse(BaseModel):
    status: str
    version: str
    environment: str
    storage_provider: str
    timestamp: str
