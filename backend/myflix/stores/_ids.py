"""
Identifier helpers shared by the stores.
"""
from typing import Any

from bson import ObjectId


def id_filter(value: str) -> dict[str, Any]:
    """
    Build an ``_id`` filter for a path identifier.

    Values that look like ObjectIds are matched as ObjectIds; anything else
    is matched as a plain string id (seeded catalogs may use readable ids).
    """
    if ObjectId.is_valid(value):
        return {"_id": {"$in": [ObjectId(value), value]}}
    return {"_id": value}
