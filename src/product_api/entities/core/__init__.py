"""Shared entity building blocks."""

from ._base import Entity, EntityTable
from .response import ApiResponse

__all__ = ["ApiResponse", "Entity", "EntityTable"]
