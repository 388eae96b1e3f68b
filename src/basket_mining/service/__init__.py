"""Service utilities backing the mining API."""

from .dataset_catalog import DatasetCatalog

__all__ = ["DatasetCatalog"]
