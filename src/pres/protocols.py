"""Protocol definitions for pres.

Subjects may optionally report their own presenter class. The resolver checks
for this capability before falling back to the naming convention.
"""

from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class PresenterSource(Protocol):
    """Protocol for domain objects that choose their own presenter.

    Uses structural subtyping, so domain classes never need to inherit from
    anything in pres. Implementing ``presenter_class`` is enough.
    """

    def presenter_class(self) -> Union[type, str]:
        """Return the presenter class (or its registered name) for this object."""
        ...
