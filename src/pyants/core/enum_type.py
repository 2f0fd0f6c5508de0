# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Enum types: closed sets of values with exhaustive matching."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pyants.core.errors import IncompleteMatch, NotEnumMember
from pyants.core.type import Type
from pyants.render.pretty import Renderer, to_pretty

_LOGGER = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class EnumType(Type):
    """A Type accepting exactly the declared ``members``.

    Attributes:
        members: Allowed values in declaration order.
    """

    members: tuple[Any, ...]

    def __call__(self, value: Any) -> Any:
        if self.check(value):
            return value
        raise NotEnumMember(self.name, value, self.render(value))

    def match(self, value: Any, actions: Mapping[Any, Any]) -> Any:
        """Return the action registered for *value*.

        *actions* must have an entry for every member, whichever member
        *value* is; the table is checked for completeness on every call.
        Entries are returned as-is, so they can be plain values or handlers
        for the caller to invoke.

        Raises:
            NotEnumMember: If a key of *actions*, or *value*, is not a member.
            IncompleteMatch: If any member lacks an action. All missing
                members are reported together.
        """
        for key in actions:
            self(key)
        missing = [member for member in self.members if not _contains(actions, member)]
        if missing:
            raise IncompleteMatch(self.name, missing, self.render(missing))
        _LOGGER.debug("Dispatching enum '%s' on %r", self.name, value)
        return actions[self(value)]


def enum(name: str, members: Iterable[Any], *, render: Renderer = to_pretty) -> EnumType:
    """Define an enum type with the given members."""
    values = tuple(members)
    return EnumType(name=name, check=lambda v: _contains(values, v), render=render, members=values)


# ################
# Implementation
# ################


def _contains(values: Iterable[Any], value: Any) -> bool:
    """Membership by kind and value, so True is not 1 and 1.0 is not 1."""
    return any(type(value) is type(member) and value == member for member in values)
