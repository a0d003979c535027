"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .metadata_repository import IMetadataRepository

__all__ = ["IMetadataRepository"]
