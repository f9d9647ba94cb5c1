"""pres: presenters for view layers.

Wrap domain objects in presenter classes chosen by convention:

- an explicit ``presenter=`` argument
- the base ``Presenter`` for ``None``
- ``obj.presenter_class`` when the object defines it
- ``<ClassName>Presenter`` from the presenter registry

Example:
    >>> from pres import Presenter, present
    >>>
    >>> class UserPresenter(Presenter):
    ...     def display_name(self):
    ...         return self.object.name.title()
    >>>
    >>> present(user, view_context).display_name()
    'Ada Lovelace'
    >>> [p.display_name() for p in present(users, view_context)]
    ['Ada Lovelace', 'Grace Hopper']
"""

from .config import PresConfiguration, load_config
from .exceptions import (
    ConfigurationError,
    PresError,
    PresenterImportError,
    PresenterNotFoundError,
)
from .presenter import Presenter
from .presents import Presents, present, resolve_presenter_class
from .protocols import PresenterSource
from .registry import PresenterRegistry, create_registry, default_registry

__version__ = "0.1.0"

__all__ = [
    # Presenting
    "present",
    "resolve_presenter_class",
    "Presents",
    "Presenter",
    "PresenterSource",
    # Registry & config
    "PresenterRegistry",
    "create_registry",
    "default_registry",
    "PresConfiguration",
    "load_config",
    # Exceptions
    "PresError",
    "PresenterNotFoundError",
    "PresenterImportError",
    "ConfigurationError",
]
