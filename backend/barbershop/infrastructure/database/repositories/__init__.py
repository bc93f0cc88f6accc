from .collection_storage import SQLAlchemyCollectionStorage

__all__ = [
    "SQLAlchemyCollectionStorage",
]
