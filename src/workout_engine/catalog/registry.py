"""Catalog registry with auto-discovery of CatalogProvider subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from pathlib import Path

from workout_engine.catalog.base import CatalogProvider
from workout_engine.models.enums import Library, category_family, cross_training_library

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """Discovers and manages all CatalogProvider implementations.

    Auto-discovers providers by scanning the catalog/ package for any
    concrete subclasses of CatalogProvider. A new library is added by
    placing a .py file in the package; no manual registration needed.
    Tests can build an empty registry and ``register`` stub providers.
    """

    def __init__(self) -> None:
        self._providers: dict[Library, CatalogProvider] = {}

    def discover_providers(self) -> None:
        """Scan the catalog package and register all CatalogProvider subclasses."""
        import workout_engine.catalog as catalog_pkg

        catalog_path = Path(catalog_pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(catalog_pkg.__name__, str(catalog_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        """Import all modules under a package and register providers."""
        for importer, module_name, is_pkg in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.debug("Skipping catalog module %s (import failed)", module_name)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, CatalogProvider)
                    and attr is not CatalogProvider
                    and not getattr(attr, "__abstractmethods__", set())
                    and getattr(attr, "library", None) is not None
                    and attr.library not in self._providers
                ):
                    self.register(attr())

    def register(self, provider: CatalogProvider) -> None:
        """Register a provider instance under its library."""
        logger.debug("Registered %s catalog (%s)", provider.key, type(provider).__name__)
        self._providers[provider.library] = provider

    def get(self, library: Library | str) -> CatalogProvider | None:
        """Retrieve a provider by Library or by provenance key ("longRun")."""
        if isinstance(library, str):
            resolved = Library.from_key(library)
            if resolved is None:
                return None
            library = resolved
        return self._providers.get(library)

    def for_category(self, category: str | None) -> CatalogProvider | None:
        """Provider serving a raw workout category ("intervals", "long-run", ...)."""
        family = category_family(category)
        return self._providers.get(family) if family is not None else None

    def for_cross_training(self, kind: str | None) -> CatalogProvider | None:
        """Provider serving a cross-training equipment name ("pool", "rowing", ...)."""
        library = cross_training_library(kind)
        return self._providers.get(library) if library is not None else None

    @property
    def library_keys(self) -> list[str]:
        """List all registered provenance keys."""
        return [library.key for library in self._providers]
