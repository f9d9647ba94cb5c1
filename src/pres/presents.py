"""Wrap domain objects (or collections of them) in presenter instances.

Example:
    >>> from pres import Presenter, present
    >>>
    >>> class OrderPresenter(Presenter):
    ...     def total(self):
    ...         return f"${self.object.total:.2f}"
    >>>
    >>> present(order, view_context, cool=True)
    <OrderPresenter object=<Order ...>>
    >>> present([order, other_order], view_context)
    [<OrderPresenter ...>, <OrderPresenter ...>]
    >>> present(None, view_context)
    <Presenter object=None>
"""

import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, List, Optional, Union

from .protocols import PresenterSource
from .registry import PresenterRegistry, default_registry

logger = logging.getLogger(__name__)

_SCALAR_ITERABLES = (str, bytes, bytearray, Mapping, set, frozenset)


def _is_sequence_like(subject: Any) -> bool:
    """Lists, tuples, generators, dict views and query results are presented item by item.

    Strings, bytes, mappings and sets are single subjects.
    """
    if isinstance(subject, _SCALAR_ITERABLES):
        return False
    return isinstance(subject, Iterable)


def _reports_presenter(subject: Any) -> bool:
    if not isinstance(subject, PresenterSource):
        return False
    # A class whose instances report a presenter does not report one itself
    if isinstance(subject, type):
        return not inspect.isfunction(getattr(subject, "presenter_class"))
    return True


def _reported_presenter_class(subject: PresenterSource, registry: PresenterRegistry) -> type:
    reported = subject.presenter_class
    # Method form is called; a class attribute holding the class is used as-is
    if not isinstance(reported, type) and callable(reported):
        reported = reported()
    if isinstance(reported, str):
        return registry.get(reported)
    return reported


def resolve_presenter_class(subject: Any, registry: Optional[PresenterRegistry] = None) -> type:
    """Select the presenter class for a single subject.

    Resolution order:
    1. ``None`` -> the base :class:`pres.Presenter`
    2. ``subject.presenter_class`` if the subject defines it
    3. the registered class named ``<type name><suffix>``, e.g. ``OrderPresenter``

    Args:
        subject: Domain object to present (may be None)
        registry: Registry for the naming convention (default: ``default_registry``)

    Returns:
        The presenter class

    Raises:
        PresenterNotFoundError: If the conventional name is not registered
    """
    registry = registry if registry is not None else default_registry

    if subject is None:
        # Import here to avoid circular dependency
        from .presenter import Presenter

        return Presenter

    if _reports_presenter(subject):
        presenter_cls = _reported_presenter_class(subject, registry)
        logger.debug(f"{type(subject).__name__} reports presenter {presenter_cls!r}")
        return presenter_cls

    presenter_cls = registry.lookup_for(type(subject))
    logger.debug(f"Resolved {type(subject).__name__} -> {presenter_cls.__name__}")
    return presenter_cls


def present(
    subject: Any,
    view_context: Any = None,
    *,
    presenter: Optional[type] = None,
    callback: Optional[Callable[[Any], Any]] = None,
    registry: Optional[PresenterRegistry] = None,
    **options: Any,
) -> Union[Any, List[Any]]:
    """Wrap an object or collection of objects with a presenter class.

    The presenter class is, in order of precedence: ``presenter`` if given,
    the base ``Presenter`` if ``subject`` is None, ``subject.presenter_class``
    if defined, and otherwise the conventionally named class from the registry
    (``User`` -> ``UserPresenter``).

    ``view_context``, ``presenter``, ``callback`` and ``registry`` are taken by
    ``present`` itself, so presenters cannot receive options with those names.
    Wrappers that mix in :class:`Presents` inherit an explicit ``registry``
    unless their class sets its own ``presenter_registry``.

    Args:
        subject: Object to wrap, None, or an iterable of objects
        view_context: Rendering context passed to each presenter unchanged
        presenter: Explicit presenter class; skips resolution entirely
        callback: Called with each new presenter before it is returned
        registry: Registry for conventional lookup (default: ``default_registry``)
        **options: Passed to the presenter constructor as keyword arguments

    Returns:
        A new presenter, or a list of new presenters for a sequence subject

    Raises:
        PresenterNotFoundError: If no presenter can be found for a subject
    """
    if _is_sequence_like(subject):
        return [
            present(
                item,
                view_context,
                presenter=presenter,
                callback=callback,
                registry=registry,
                **options,
            )
            for item in subject
        ]

    presenter_cls = presenter if presenter is not None else resolve_presenter_class(subject, registry)
    wrapper = presenter_cls(subject, view_context, **options)
    if registry is not None and isinstance(wrapper, Presents) and wrapper.presenter_registry is None:
        wrapper.presenter_registry = registry
    if callback is not None:
        callback(wrapper)
    return wrapper


class Presents:
    """Mixin adding ``present()`` to anything that owns a ``view_context``.

    Hosts may set ``presenter_registry`` to use a registry other than the
    default one. ``present()`` sets it on the wrappers it builds from an
    explicit registry.
    """

    view_context: Any = None
    presenter_registry: Optional[PresenterRegistry] = None

    def present(
        self,
        subject: Any,
        presenter: Optional[type] = None,
        callback: Optional[Callable[[Any], Any]] = None,
        **options: Any,
    ) -> Union[Any, List[Any]]:
        """Present ``subject`` with this object's view context.

        See :func:`pres.presents.present` for the resolution rules.
        """
        return present(
            subject,
            self.view_context,
            presenter=presenter,
            callback=callback,
            registry=self.presenter_registry,
            **options,
        )
