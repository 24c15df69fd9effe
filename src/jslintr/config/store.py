# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Option resolution and per-instance option storage.

The store is seeded from the selected variant's default profile and then
overridden by caller-supplied values. Resolution order is fixed: base
defaults, then the variant's extra defaults, then caller overrides. Unknown
keys are accepted at every step.

A store is not synchronised. ``snapshot`` is taken at the start of each check,
and callers that share one checker across threads must not mutate it while a
check is running.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jslintr.core.model_types import LogComponent
from jslintr.logging import structured_extra

from .options import OPTION_MODELS, JSLintOptions, base_defaults, variant_extra_defaults

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from jslintr.core.model_types import EngineVariant
    from jslintr.core.type_aliases import OptionMapping

logger: logging.Logger = logging.getLogger("jslintr.config")


def resolve(defaults: Mapping[str, object], overrides: Mapping[str, object] | None = None) -> OptionMapping:
    """Merge caller overrides on top of defaults, key by key.

    Args:
        defaults: Baseline option values.
        overrides: Caller-supplied values. Keys absent from ``defaults`` are
            kept as-is.

    Returns:
        A new mapping with every default key and every override key, in
        default order followed by new override keys.
    """
    resolved: OptionMapping = dict(defaults)
    if overrides:
        resolved.update(overrides)
    return resolved


def profile_defaults(variant: EngineVariant) -> OptionMapping:
    """Return the full default profile for a variant (base plus extras)."""
    return resolve(base_defaults(), variant_extra_defaults(variant))


class ConfigStore:
    """Resolved option values for one checker instance.

    Known options are fields of the variant's option record (``JSLintOptions``
    or ``JSHintOptions``) and can be read or assigned as attributes of
    :attr:`options`. Unknown options live in the record's extra mapping.
    """

    __slots__ = ("_options", "_variant")

    def __init__(self, variant: EngineVariant, overrides: Mapping[str, object] | None = None) -> None:
        self._variant = variant
        resolved = resolve(profile_defaults(variant), overrides)
        self._options: JSLintOptions = OPTION_MODELS[variant].model_construct(**resolved)
        unknown = sorted(set(overrides or {}) - set(type(self._options).model_fields))
        if unknown:
            logger.debug(
                "Storing options unknown to %s: %s",
                variant,
                ", ".join(unknown),
                extra=structured_extra(component=LogComponent.CONFIG, engine=variant),
            )

    @property
    def variant(self) -> EngineVariant:
        return self._variant

    @property
    def options(self) -> JSLintOptions:
        """The typed option record backing this store."""
        return self._options

    def _extras(self) -> dict[str, object]:
        extra = self._options.__pydantic_extra__
        if extra is None:
            extra = {}
            object.__setattr__(self._options, "__pydantic_extra__", extra)
        return extra

    def _is_field(self, name: str) -> bool:
        return name in type(self._options).model_fields

    def get(self, name: str) -> object:
        """Return the current value of ``name``.

        Raises:
            KeyError: If the option is neither declared nor stored.
        """
        if self._is_field(name):
            return getattr(self._options, name)
        extras = self._extras()
        if name in extras:
            return extras[name]
        raise KeyError(name)

    def set(self, name: str, value: object) -> None:
        """Store ``value`` for ``name``; it applies to every later check."""
        if self._is_field(name):
            setattr(self._options, name, value)
        else:
            self._extras()[name] = value

    def names(self) -> list[str]:
        return [*type(self._options).model_fields, *self._extras()]

    def snapshot(self) -> OptionMapping:
        """Copy every resolved option, declared fields first, then extras."""
        values: OptionMapping = {name: getattr(self._options, name) for name in type(self._options).model_fields}
        values.update(self._extras())
        return values

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and (self._is_field(name) or name in self._extras())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.names())

    def __repr__(self) -> str:
        return f"ConfigStore(variant={self._variant.value!r}, options={len(self)})"


__all__ = ["ConfigStore", "profile_defaults", "resolve"]
