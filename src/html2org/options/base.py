#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/options/base.py
"""Base classes for html2org options.

All option objects are frozen dataclasses. Field ``metadata`` carries the
help text, CLI name and choices used by :mod:`html2org.cli.builder` to
generate command-line flags.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses.

    Options may nest other options (``Html2OrgOptions.pretty_tables_options``).
    Both helpers address nested fields with dotted names, the same names the
    command line uses as argparse destinations.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values. A dotted name such as
            ``"pretty_tables_options.col_width"`` updates a field of a nested
            options object, which is rebuilt rather than mutated.

        Returns
        -------
        Self
            New instance; ``__post_init__`` validation runs again

        Raises
        ------
        TypeError
            If a name does not match a field
        ValueError
            If a new value is rejected by validation

        Examples
        --------
        >>> from html2org.options import Html2OrgOptions
        >>> options = Html2OrgOptions().create_updated(**{"pretty_tables_options.col_width": 20})
        >>> options.pretty_tables_options.col_width
        20

        """
        direct: dict[str, Any] = {}
        nested: dict[str, dict[str, Any]] = {}
        for name, value in kwargs.items():
            parent, dot, child = name.partition(".")
            if dot:
                nested.setdefault(parent, {})[child] = value
            else:
                direct[name] = value

        for parent, values in nested.items():
            current = direct.get(parent, getattr(self, parent, None))
            if not isinstance(current, CloneFrozenMixin):
                raise TypeError(f"{type(self).__name__} has no nested options named '{parent}'")
            direct[parent] = current.create_updated(**values)

        return replace(self, **direct)

    def to_flat_dict(self) -> dict[str, Any]:
        """Return all field values keyed by dotted field name."""
        flat: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, CloneFrozenMixin):
                flat.update({f"{f.name}.{key}": item for key, item in value.to_flat_dict().items()})
            else:
                flat[f.name] = value
        return flat
