"""Component Factory for strategy instantiation.

Instantiates the configured segmenter and rule loader implementations
at runtime based on Settings.
"""

import logging

from proxyrules.core.config import Settings, get_settings
from proxyrules.interfaces.loader import BaseRuleLoader
from proxyrules.interfaces.segmenter import BaseSegmenter
from proxyrules.strategies.loaders import MarkdownRuleLoader
from proxyrules.strategies.segmenters import FencedCodeSegmenter

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        segmenter = factory.get_segmenter()
        loader = factory.get_loader()
        rules = loader.load(document)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Settings to use. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._segmenter_cache: BaseSegmenter | None = None
        self._loader_cache: BaseRuleLoader | None = None

    def get_segmenter(self, segmenter_type: str | None = None) -> BaseSegmenter:
        """Get a segmenter instance based on the specified type.

        Args:
            segmenter_type: The segmenter type to instantiate. If None, uses settings.

        Returns:
            A BaseSegmenter implementation instance.

        Raises:
            ValueError: If the segmenter type is unknown.
        """
        if self._segmenter_cache is None or segmenter_type is not None:
            segmenter_type = segmenter_type or self._settings.segmenter_type

            logger.info(f"Instantiating segmenter: {segmenter_type}")

            match segmenter_type:
                case "fenced":
                    self._segmenter_cache = FencedCodeSegmenter(
                        unknown_language=self._settings.unknown_language,
                    )
                case _:
                    raise ValueError(
                        f"Unknown segmenter type: {segmenter_type}. "
                        f"Valid options: 'fenced'"
                    )

        return self._segmenter_cache

    def get_loader(self, loader_type: str | None = None) -> BaseRuleLoader:
        """Get a rule loader instance based on the specified type.

        Args:
            loader_type: The loader type to instantiate. If None, uses settings.

        Returns:
            A BaseRuleLoader implementation instance.

        Raises:
            ValueError: If the loader type is unknown.
        """
        if self._loader_cache is None or loader_type is not None:
            loader_type = loader_type or self._settings.loader_type

            logger.info(f"Instantiating rule loader: {loader_type}")

            match loader_type:
                case "markdown":
                    self._loader_cache = MarkdownRuleLoader(
                        segmenter=self.get_segmenter(),
                        languages=self._settings.rule_languages,
                        comment_prefix=self._settings.comment_prefix,
                        skip_invalid=self._settings.skip_invalid_rules,
                    )
                case _:
                    raise ValueError(
                        f"Unknown loader type: {loader_type}. "
                        f"Valid options: 'markdown'"
                    )

        return self._loader_cache

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        """
        self._segmenter_cache = None
        self._loader_cache = None
        logger.debug("Component factory cache cleared")


# Global factory instance
_factory: ComponentFactory | None = None


def get_factory() -> ComponentFactory:
    """Get or create the global ComponentFactory instance.

    Returns:
        The singleton ComponentFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ComponentFactory()
    return _factory
