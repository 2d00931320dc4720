from .contact_service import ContactService
from .merge import (
    MERGE_SUCCESS_MESSAGE,
    DuplicateContactService,
    MergeResult,
    merge_duplicates,
)

__all__ = [
    "MERGE_SUCCESS_MESSAGE",
    "ContactService",
    "DuplicateContactService",
    "MergeResult",
    "merge_duplicates",
]
