"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of repositories and services
for use with FastAPI's Depends() system.

Note: We use module-level singletons instead of @lru_cache with Depends()
parameters, which is an antipattern that can cause unexpected behavior.
"""

import os
from pathlib import Path
from typing import Optional

from app.domain.ports import BookCatalogRepository
from app.domain.services import CatalogService
from app.infrastructure.db.sqlite_book_catalog_repository import SqliteBookCatalogRepository

# Configuration from environment
DB_PATH = Path(os.getenv("DB_PATH", "data/library.db"))
API_KEY: Optional[str] = os.getenv("API_KEY") or None

# Module-level singletons (initialized lazily)
_catalog_repository: Optional[BookCatalogRepository] = None
_catalog_service: Optional[CatalogService] = None


def get_catalog_repository() -> BookCatalogRepository:
    """Provide a singleton instance of the catalog repository."""
    global _catalog_repository
    if _catalog_repository is None:
        _catalog_repository = SqliteBookCatalogRepository(DB_PATH)
    return _catalog_repository


def get_catalog_service() -> CatalogService:
    """Provide the Catalog Service with its repository wired."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService(catalog_repo=get_catalog_repository())
    return _catalog_service


def get_api_key() -> Optional[str]:
    """Provide the configured API key, None when authentication is disabled."""
    return API_KEY


def reset_dependencies() -> None:
    """
    Reset all singletons. Useful for testing.

    This allows tests to inject mock dependencies by resetting
    the module state between test cases.
    """
    global _catalog_repository, _catalog_service

    _catalog_repository = None
    _catalog_service = None
