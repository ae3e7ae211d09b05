"""Shared data models."""

from pydantic import BaseModel


class StorageObjectRef(BaseModel, frozen=True):
    """Reference to an object persisted in durable storage."""

    key: str
    bucket: str
