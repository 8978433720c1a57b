# Parameter resolution — find a field's value wherever the caller put it.
# Created: 2026-03-02
#
# A node can be driven by fixed host configuration or by structured input
# (an AI agent, an upstream HTTP call). Each field is looked up in this order:
#
#   1. payload[name]
#   2. payload["params"][name]
#   3. payload["parameters"][name]
#   4. steps 1-3 again for every alias registered for name
#   5. the host-configured value for the current item
#   6. the caller's default

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ParameterNotConfigured(KeyError):
    """The host has no value for this parameter on the current operation."""


class NodeParameters(Protocol):
    """Host-side parameter store (the node's configured fields)."""

    def get(self, name: str, item_index: int) -> Any:
        """Return the configured value or raise ``ParameterNotConfigured``."""
        ...


class StaticNodeParameters:
    """Fixed node configuration with optional per-item overrides.

    Dotted names walk nested collections, so ``filterOptions.listNames``
    reads ``values["filterOptions"]["listNames"]``.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        per_item: Sequence[Mapping[str, Any]] | None = None,
    ):
        self._values = dict(values or {})
        self._per_item = list(per_item or [])

    def get(self, name: str, item_index: int) -> Any:
        sources: list[Mapping[str, Any]] = []
        if item_index < len(self._per_item):
            sources.append(self._per_item[item_index])
        sources.append(self._values)

        for source in sources:
            value = _walk(source, name)
            if value is not MISSING:
                return value
        raise ParameterNotConfigured(name)


def _walk(source: Mapping[str, Any], dotted: str) -> Any:
    current: Any = source
    for part in dotted.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return MISSING
        current = current[part]
    return current


# ---------------------------------------------------------------------------
# Payload lookup strategies (first hit wins)
# ---------------------------------------------------------------------------

PayloadLookup = Callable[[Mapping[str, Any], str], Any]


def _present(value: Any) -> Any:
    # JSON null counts as absent, same as a missing key.
    return MISSING if value is None else value


def from_flat(payload: Mapping[str, Any], name: str) -> Any:
    return _present(payload.get(name))


def _from_nested(key: str) -> PayloadLookup:
    def lookup(payload: Mapping[str, Any], name: str) -> Any:
        nested = payload.get(key)
        if not isinstance(nested, Mapping):
            return MISSING
        return _present(nested.get(name))

    lookup.__name__ = f"from_{key}"
    return lookup


from_params = _from_nested("params")
from_parameters = _from_nested("parameters")

PAYLOAD_LOOKUPS: tuple[PayloadLookup, ...] = (from_flat, from_params, from_parameters)


class ParameterResolver:
    """Resolve logical field names for one node invocation.

    Args:
        parameters: Host parameter store. ``None`` means nothing is configured.
        aliases: Alternate field names accepted for a canonical name.
    """

    def __init__(
        self,
        parameters: NodeParameters | None = None,
        aliases: Mapping[str, Sequence[str]] | None = None,
    ):
        self._parameters = parameters
        self._aliases = {k: tuple(v) for k, v in (aliases or {}).items()}

    def names_for(self, name: str) -> tuple[str, ...]:
        return (name, *self._aliases.get(name, ()))

    def from_payload(self, name: str, payload: Mapping[str, Any]) -> Any:
        """Steps 1-4: the payload under the canonical name, then its aliases."""
        for candidate in self.names_for(name):
            for lookup in PAYLOAD_LOOKUPS:
                value = lookup(payload, candidate)
                if value is not MISSING:
                    return value
        return MISSING

    def from_host(self, name: str, item_index: int) -> Any:
        """Step 5: the host-configured value, or ``MISSING``."""
        if self._parameters is None:
            return MISSING
        try:
            value = self._parameters.get(name, item_index)
        except LookupError:
            return MISSING
        return _present(value)

    def resolve(
        self,
        name: str,
        item_index: int,
        payload: Mapping[str, Any],
        default: Any = None,
    ) -> Any:
        value = self.from_payload(name, payload)
        if value is MISSING:
            value = self.from_host(name, item_index)
        if value is MISSING:
            return default
        return value


class ItemContext:
    """Resolver bound to one input item."""

    def __init__(self, resolver: ParameterResolver, item_index: int, payload: Mapping[str, Any]):
        self.resolver = resolver
        self.item_index = item_index
        self.payload = payload

    def get(self, name: str, default: Any = None) -> Any:
        return self.resolver.resolve(name, self.item_index, self.payload, default)

    def collection(self, name: str) -> Mapping[str, Any]:
        """Resolve a collection-valued field, always returning a mapping."""
        value = self.get(name, {})
        return value if isinstance(value, Mapping) else {}

    def from_payload(self, name: str) -> Any:
        return self.resolver.from_payload(name, self.payload)

    def from_host(self, name: str) -> Any:
        return self.resolver.from_host(name, self.item_index)
