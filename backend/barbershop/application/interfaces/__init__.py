from .collection_storage import CollectionStorage

__all__ = [
    "CollectionStorage",
]
