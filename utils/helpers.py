"""Helper utility functions."""

from typing import Any, Dict, Iterable, List, Optional


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Serialize a MongoDB document for a JSON response."""
    if not document:
        return None
    if "_id" in document:
        document["_id"] = str(document["_id"])
    return document


def serialize_documents(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Serialize a list of MongoDB documents."""
    return [serialize_document(doc) for doc in documents]
