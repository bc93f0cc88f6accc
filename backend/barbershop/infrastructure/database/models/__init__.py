from .store_entry import StoreEntryModel

__all__ = [
    "StoreEntryModel",
]
