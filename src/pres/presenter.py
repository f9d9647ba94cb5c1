"""Base presenter class."""

from typing import Any

from .presents import Presents
from .registry import default_registry


class Presenter(Presents):
    """Wraps a domain object with view-layer behaviour.

    ``Presenter`` itself is what ``present(None)`` produces. Application
    presenters subclass it and are registered in ``default_registry`` under
    their class name, which is what the naming convention looks up::

        class OrderPresenter(Presenter):
            def total(self):
                return f"${self.object.total:.2f}"

    Pass ``register=False`` in the class statement to keep a subclass out of
    the registry.

    Attributes read on a presenter that it does not define itself are read
    from the wrapped object.

    Attributes:
        object: The wrapped domain object (may be None)
        view_context: Rendering context handed in by the caller
        options: Extra keyword options given to ``present()``
    """

    def __init_subclass__(cls, register: bool = True, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if register:
            default_registry.register(cls)

    def __init__(self, object: Any = None, view_context: Any = None, **options: Any):
        self.object = object
        self.view_context = view_context
        self.options = options

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes the presenter lacks
        if name.startswith("__") or "object" not in self.__dict__:
            raise AttributeError(name)
        wrapped = self.__dict__["object"]
        try:
            return getattr(wrapped, name)
        except AttributeError:
            raise AttributeError(
                f"'{type(self).__name__}' object and its wrapped "
                f"'{type(wrapped).__name__}' have no attribute '{name}'"
            ) from None

    def __bool__(self) -> bool:
        return bool(self.object)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} object={self.object!r}>"
