"""Presenter registry: the name -> presenter class table.

The naming-convention fallback in :func:`pres.presents.resolve_presenter_class`
looks presenter classes up here. Subclasses of :class:`pres.Presenter` register
themselves in ``default_registry``; anything else is registered explicitly or
through a ``pres.yaml`` file.
"""

import importlib
import logging
from typing import Callable, Dict, List, Optional, Union

from .config import DEFAULT_PRESENTER_SUFFIX, PresConfiguration
from .exceptions import PresenterImportError, PresenterNotFoundError

logger = logging.getLogger(__name__)


def import_presenter(path: str) -> type:
    """Import a presenter class from a ``"package.module:ClassName"`` path.

    Args:
        path: Module path and attribute name separated by a colon

    Returns:
        The imported class

    Raises:
        PresenterImportError: If the module or attribute cannot be loaded
    """
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise PresenterImportError(f"Invalid presenter path '{path}', expected 'module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.error(f"Failed to import {module_name}. Error: {e}")
        raise PresenterImportError(f"Cannot import module '{module_name}' for '{path}'") from e

    try:
        obj = module
        for part in attr.split("."):
            obj = getattr(obj, part)
    except AttributeError as e:
        raise PresenterImportError(f"Module '{module_name}' has no attribute '{attr}'") from e

    if not isinstance(obj, type):
        raise PresenterImportError(f"'{path}' is not a class")
    return obj


class PresenterRegistry:
    """Maps presenter names to presenter classes."""

    def __init__(self, presenter_suffix: str = DEFAULT_PRESENTER_SUFFIX):
        """
        Initialize an empty registry.

        Args:
            presenter_suffix: Suffix appended to a subject's class name for
                conventional lookup
        """
        self.presenter_suffix = presenter_suffix
        self._presenters: Dict[str, type] = {}

    def register(
        self, cls: Optional[type] = None, *, name: Optional[str] = None
    ) -> Union[type, Callable[[type], type]]:
        """Register a presenter class, directly or as a decorator.

        Re-registering a name replaces the previous class.

        Args:
            cls: Presenter class to register
            name: Name to register under (default: ``cls.__name__``)

        Returns:
            The class itself, or a decorator when called without ``cls``

        Example:
            >>> @registry.register
            ... class OrderPresenter(Presenter):
            ...     pass
            >>> registry.register(LegacyPresenter, name="InvoicePresenter")
        """

        def decorator(presenter_cls: type) -> type:
            key = name or presenter_cls.__name__
            existing = self._presenters.get(key)
            if existing is not None and existing is not presenter_cls:
                logger.warning(
                    f"Replacing presenter '{key}': {existing.__module__}.{existing.__qualname__} "
                    f"-> {presenter_cls.__module__}.{presenter_cls.__qualname__}"
                )
            self._presenters[key] = presenter_cls
            return presenter_cls

        if cls is None:
            return decorator
        return decorator(cls)

    def register_path(self, name: str, path: str) -> type:
        """Import a presenter class by dotted path and register it under ``name``.

        Args:
            name: Name to register under
            path: ``"package.module:ClassName"`` import path

        Returns:
            The imported class

        Raises:
            PresenterImportError: If the path cannot be imported
        """
        presenter_cls = import_presenter(path)
        self.register(presenter_cls, name=name)
        logger.info(f"Registered presenter '{name}' from {path}")
        return presenter_cls

    def unregister(self, name: str) -> None:
        """
        Remove a presenter from the registry.

        Raises:
            PresenterNotFoundError: If the name is not registered
        """
        if name not in self._presenters:
            raise PresenterNotFoundError(name)
        del self._presenters[name]

    def get(self, name: str) -> type:
        """Return the presenter class registered under ``name``.

        Raises:
            PresenterNotFoundError: If the name is not registered
        """
        try:
            return self._presenters[name]
        except KeyError:
            logger.debug(f"No presenter registered as '{name}'")
            raise PresenterNotFoundError(name) from None

    def presenter_name_for(self, subject_type: type) -> str:
        """Build the conventional presenter name for a subject type."""
        return f"{subject_type.__name__}{self.presenter_suffix}"

    def lookup_for(self, subject_type: type) -> type:
        """Return the conventionally named presenter for a subject type.

        Args:
            subject_type: Runtime type of the subject, e.g. ``Order``

        Returns:
            The class registered as ``OrderPresenter``

        Raises:
            PresenterNotFoundError: If no such presenter is registered
        """
        return self.get(self.presenter_name_for(subject_type))

    def configure(self, config: PresConfiguration) -> "PresenterRegistry":
        """Apply a configuration: set the suffix and register configured paths.

        Every path is imported before anything changes, so a failed import
        leaves the registry as it was.

        Args:
            config: Configuration, usually from :func:`pres.config.load_config`

        Returns:
            This registry

        Raises:
            PresenterImportError: If any configured path cannot be imported
        """
        imported = {name: import_presenter(path) for name, path in config.presenters.items()}
        self.presenter_suffix = config.presenter_suffix
        for name, presenter_cls in imported.items():
            self.register(presenter_cls, name=name)
            logger.info(f"Registered presenter '{name}' from {config.presenters[name]}")
        return self

    def names(self) -> List[str]:
        """List registered presenter names in sorted order."""
        return sorted(self._presenters)

    def clear(self) -> None:
        self._presenters.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._presenters

    def __len__(self) -> int:
        return len(self._presenters)

    def __repr__(self) -> str:
        return f"PresenterRegistry(presenters={self.names()!r})"


def create_registry(config: Optional[PresConfiguration] = None) -> PresenterRegistry:
    """
    Create a PresenterRegistry from a configuration.

    Args:
        config: Configuration to apply (default: empty configuration)

    Returns:
        PresenterRegistry: Initialized registry
    """
    registry = PresenterRegistry()
    if config is not None:
        registry.configure(config)
    return registry


default_registry = create_registry()
