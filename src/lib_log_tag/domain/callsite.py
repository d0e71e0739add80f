"""Call-site value object and owner-identity normalisation.

Purpose
-------
Describe *where* a log call came from and map that location (or a class,
module, or identity string supplied by a host) onto the owner identity used as
the registry key.

Contents
--------
* :class:`CallSite` – transient value produced once per log call.
* :class:`CallSiteNotFound` – raised when no qualifying frame exists.
* :func:`normalize_owner` / :func:`owner_identity` – enclosing-unit
  normalisation shared by the resolver and the configuration API.

System Role
-----------
Nested helper classes and closures share their outermost enclosing class's
logger configuration; both the frame walker and :func:`lib_log_tag.get_logger`
go through :func:`normalize_owner` so the two paths agree on identities.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Mapping


class CallSiteNotFound(LookupError):
    """Raised when the stack holds no frame outside the logging library."""


@dataclass(slots=True, frozen=True)
class CallSite:
    """Resolved location of a log call.

    Attributes
    ----------
    owner:
        Normalised owner identity (``"pkg.module"`` or ``"pkg.module.Outer"``).
    function_name:
        Name of the function executing the log call.
    line_number:
        Source line of the log call.
    file_name:
        Base name of the source file.
    """

    owner: str
    function_name: str
    line_number: int
    file_name: str

    @property
    def simple_name(self) -> str:
        """Return the last dotted component of :attr:`owner`.

        Examples
        --------
        >>> CallSite("app.models.Foo", "bar", 3, "models.py").simple_name
        'Foo'
        """
        return self.owner.rsplit(".", 1)[-1]


def normalize_owner(module_name: str, qualname: str, namespace: Mapping[str, Any]) -> str:
    """Return the owner identity for code named ``qualname`` in ``module_name``.

    The outermost qualname component wins when it names a class bound in the
    module ``namespace``; anything else (module-level functions, module code,
    classes local to a function) is owned by the module itself.

    Examples
    --------
    >>> class Outer:
    ...     class Inner:
    ...         pass
    >>> normalize_owner("app", "Outer.Inner.run", {"Outer": Outer})
    'app.Outer'
    >>> normalize_owner("app", "helper", {"helper": len})
    'app'
    >>> normalize_owner("app", "<module>", {})
    'app'
    """
    outermost = qualname.split(".", 1)[0]
    if isinstance(namespace.get(outermost), type):
        return f"{module_name}.{outermost}"
    return module_name


def owner_identity(owner: object) -> str | None:
    """Map a class, module, or identity string to an owner identity.

    Returns ``None`` when ``owner`` cannot be mapped; callers fall back to the
    registry's fallback state in that case.
    """
    if isinstance(owner, str):
        return owner.strip() or None
    if isinstance(owner, ModuleType):
        return owner.__name__
    if isinstance(owner, type):
        module = sys.modules.get(owner.__module__)
        namespace = vars(module) if module is not None else {owner.__name__: owner}
        return normalize_owner(owner.__module__, owner.__qualname__, namespace)
    return None


__all__ = ["CallSite", "CallSiteNotFound", "normalize_owner", "owner_identity"]
