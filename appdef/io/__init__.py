"""Input/output components for appdef.

This package contains the document tree loader and the output file store.
"""

from .document import AppDefDocument, DocumentNode
from .storage import ArtifactStore

__all__ = ["AppDefDocument", "ArtifactStore", "DocumentNode"]
