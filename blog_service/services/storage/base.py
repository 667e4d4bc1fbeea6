"""
Base storage protocol for photo assets.

This module defines the interface every object storage backend implements,
allowing different implementations (local, cloudinary, ...).
"""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol

from blog_service.services.photo import PhotoData


@dataclass(frozen=True, slots=True)
class AssetUploadResult:
    """Where an uploaded asset can be fetched and how the store names it."""

    access_url: str
    asset_id: str


class StorageService(Protocol):
    """
    Protocol defining the interface for storage services.

    All storage implementations must implement these methods
    to ensure consistent behavior across different backends.
    """

    @abstractmethod
    async def upload(self, photo: PhotoData) -> AssetUploadResult:
        """
        Store a photo under a new identifier.

        Args:
            photo: Validated image bytes and content type

        Returns:
            AssetUploadResult: Durable access URL and the store's identifier
        """
        ...

    @abstractmethod
    async def remove(self, asset_id: str) -> bool:
        """
        Delete a stored photo.

        Args:
            asset_id: Identifier returned at upload time

        Returns:
            bool: True if the asset was deleted, False if it did not exist
        """
        ...
