"""Shared configuration models for infrastructure components."""

from pydantic import BaseModel


class MinioConfig(BaseModel, frozen=True):
    """MinIO connection configuration."""

    endpoint: str
    user: str
    password: str
    bucket_name: str = "artifacts"
    secure: bool = False
