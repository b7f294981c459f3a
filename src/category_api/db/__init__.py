"""ORM mapping for the relational store."""

from .base import Base
from .models import CategoryRecord

__all__ = [
    "Base",
    "CategoryRecord",
]
