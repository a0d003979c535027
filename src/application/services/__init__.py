"""
Application Services Package

Reference resolution, graph attachment, association checks and profile
document handling shared by the management use cases.
"""

from .association_guard import AssociationGuard
from .graph_attacher import GraphAttacher, unknown_association
from .key_resolver import KeyResolver
from .profile_document_importer import ProfileDocumentImporter

__all__ = [
    "AssociationGuard",
    "GraphAttacher",
    "KeyResolver",
    "ProfileDocumentImporter",
    "unknown_association",
]
