"""Source registry for factory-based pipeline creation.

This module provides a central registry for source factories,
enabling source-agnostic pipeline creation and automatic
platform discovery.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .pipeline import IngestionPipeline
    from .sources.base import Source


class SourceRegistry:
    """Central registry for source factories.

    Platforms register themselves when imported, and the registry
    can automatically discover all available platforms.
    """

    _factories: dict[str, Callable[..., "Source"]] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Source"]) -> None:
        """Register a factory function for creating sources.

        Args:
            name: Name of the source (e.g., 'filesystem')
            factory: Callable that creates a Source instance
        """
        cls._factories[name] = factory

    @classmethod
    def create_source(cls, source_name: str, **kwargs) -> "Source":
        """Create a source from a registered factory.

        Raises:
            ValueError: If source_name is not registered
        """
        if source_name not in cls._factories:
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown source: '{source_name}'. Available sources: {available}"
            )
        return cls._factories[source_name](**kwargs)

    @classmethod
    def create_pipeline(cls, source_name: str, **kwargs) -> "IngestionPipeline":
        """Create a pipeline from a registered source.

        Args:
            source_name: Name of the registered source
            **kwargs: Arguments passed to the source factory.
                     'store' is extracted and passed to the pipeline.

        Returns:
            IngestionPipeline wired to the requested source

        Raises:
            ValueError: If source_name is not registered or no store is given

        Example:
            >>> pipeline = SourceRegistry.create_pipeline(
            ...     'filesystem',
            ...     path=Path('temp/packages'),
            ...     store=store,
            ... )
        """
        # Import here to avoid circular dependency
        from .pipeline import IngestionPipeline

        store = kwargs.pop('store', None)
        if store is None:
            raise ValueError("create_pipeline requires a 'store' argument")

        return IngestionPipeline(cls.create_source(source_name, **kwargs), store)

    @classmethod
    def list_sources(cls) -> list[str]:
        """List all registered source names."""
        return list(cls._factories.keys())

    @classmethod
    def discover_platforms(cls) -> None:
        """Auto-discover and import all platforms.

        Platforms register themselves via their __init__.py files.
        Platforms with missing dependencies are skipped.
        """
        platforms_dir = Path(__file__).parent / 'platforms'

        if not platforms_dir.exists():
            return

        for platform_path in platforms_dir.iterdir():
            if not platform_path.is_dir():
                continue

            if not (platform_path / '__init__.py').exists():
                continue

            try:
                importlib.import_module(
                    f'.platforms.{platform_path.name}',
                    package='emote_catalog'
                )
            except ImportError:
                # Platform dependencies not installed
                pass
