"""
Models package.
"""
from teachmi.models.enums import Rating
from teachmi.models.storage_slot import StorageSlot

__all__ = [
    'Rating',
    'StorageSlot',
]
