"""Cloudinary image hosting adapter."""

from .client import CloudinaryMediaStore, InMemoryMediaStore, public_id_from_url

__all__ = ["CloudinaryMediaStore", "InMemoryMediaStore", "public_id_from_url"]
