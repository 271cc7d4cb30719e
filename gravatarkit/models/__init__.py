"""Option types for Gravatar URLs."""

from gravatarkit.models.enums import DefaultImage, Rating

__all__ = ["DefaultImage", "Rating"]
