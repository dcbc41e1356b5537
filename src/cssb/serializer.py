"""Selector serialization and deserialization.

Converts selectors to and from a plain dict/list structure that maps
naturally to both JSON and YAML::

    {
        "kind": "CombinedSelector",
        "left": {"kind": "CompoundSelector",
                 "fragments": [{"kind": "element", "value": "div"}]},
        "combinator": "+",
        "right": {"kind": "CompoundSelector",
                  "fragments": [{"kind": "element", "value": "table"},
                                {"kind": "id", "value": "data"}]},
    }

Deserialization replays every fragment through ``CompoundSelector.add``,
so a document that breaks the ordering rules fails with the same
``OrderViolationError`` or ``DuplicateSingletonError`` as the equivalent
chain of calls.

Usage
-----
::

    from cssb.serializer import SelectorSerializer

    serializer = SelectorSerializer()
    json_text = serializer.to_json(selector)
    selector2 = serializer.from_json(json_text)
    assert selector.stringify() == selector2.stringify()
"""
from __future__ import annotations

import json
import logging

import yaml

from cssb.facade import SelectorBuilder
from cssb.grammar.kinds import KIND_NAMES, Fragment
from cssb.selectors.base import Stringifiable
from cssb.selectors.combined import CombinedSelector
from cssb.selectors.compound import CompoundSelector
from cssb.validator.errors import SelectorDecodeError

logger = logging.getLogger(__name__)


class SelectorSerializer:
    """Converts between selector objects and plain Python dicts.

    The serialized representation uses ``"kind"`` discriminator fields so
    that deserialization is unambiguous.

    Parameters
    ----------
    builder:
        Builder used to reconstruct selectors.  Its settings (such as
        ``strict_combinators``) apply to decoded documents.  Defaults to
        a permissive ``SelectorBuilder``.
    """

    def __init__(self, builder: SelectorBuilder | None = None) -> None:
        self._builder: SelectorBuilder = builder if builder is not None else SelectorBuilder()

    # ------------------------------------------------------------------
    # Serialization (selector → dict)
    # ------------------------------------------------------------------

    def to_dict(self, selector: Stringifiable) -> dict[str, object]:
        """Serialize a compound or combined selector to a JSON-compatible dict.

        Raises
        ------
        TypeError
            If ``selector`` is neither a ``CompoundSelector`` nor a
            ``CombinedSelector``.
        """
        if isinstance(selector, CompoundSelector):
            return {
                "kind": "CompoundSelector",
                "fragments": [self._fragment_to_dict(f) for f in selector.fragments],
            }
        if isinstance(selector, CombinedSelector):
            return {
                "kind": "CombinedSelector",
                "left": self.to_dict(selector.left),
                "combinator": selector.combinator,
                "right": self.to_dict(selector.right),
            }
        raise TypeError(f"Unknown selector type: {type(selector)}")

    def _fragment_to_dict(self, fragment: Fragment) -> dict[str, str]:
        return {"kind": fragment.kind.label, "value": fragment.value}

    # ------------------------------------------------------------------
    # Deserialization (dict → selector)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Stringifiable:
        """Deserialize a selector from a plain dict.

        Raises
        ------
        SelectorDecodeError
            If the document is structurally malformed.
        DuplicateSingletonError, OrderViolationError
            If the fragments break the compound selector rules.
        """
        if not isinstance(data, dict):
            raise SelectorDecodeError(
                f"Expected a mapping, got {type(data).__name__}"
            )
        kind = data.get("kind")
        if kind == "CompoundSelector":
            return self._compound_from_dict(data)
        if kind == "CombinedSelector":
            return self._combined_from_dict(data)
        raise SelectorDecodeError(f"Unknown selector kind: {kind!r}")

    def _compound_from_dict(self, d: dict[str, object]) -> CompoundSelector:
        fragments = d.get("fragments", [])
        if not isinstance(fragments, list):
            raise SelectorDecodeError("'fragments' must be a list")
        selector = self._builder.new()
        for item in fragments:
            if not isinstance(item, dict) or "kind" not in item or "value" not in item:
                raise SelectorDecodeError(
                    f"Fragment must be a mapping with 'kind' and 'value': {item!r}"
                )
            kind, value = item["kind"], item["value"]
            if not isinstance(kind, str) or kind not in KIND_NAMES:
                raise SelectorDecodeError(f"Unknown fragment kind: {kind!r}")
            if not isinstance(value, str):
                raise SelectorDecodeError(
                    f"Fragment value must be a string, got {type(value).__name__}"
                )
            selector.add(KIND_NAMES[kind], value)
        return selector

    def _combined_from_dict(self, d: dict[str, object]) -> Stringifiable:
        for key in ("left", "combinator", "right"):
            if key not in d:
                raise SelectorDecodeError(f"CombinedSelector is missing {key!r}")
        combinator = d["combinator"]
        if not isinstance(combinator, str):
            raise SelectorDecodeError(
                f"'combinator' must be a string, got {type(combinator).__name__}"
            )
        return self._builder.combine(
            self.from_dict(d["left"]),  # type: ignore[arg-type]
            combinator,
            self.from_dict(d["right"]),  # type: ignore[arg-type]
        )

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, selector: Stringifiable, indent: int = 2) -> str:
        """Serialize a selector to a JSON string."""
        return json.dumps(self.to_dict(selector), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Stringifiable:
        """Deserialize a selector from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("JSON decode failed: %s", exc)
            raise SelectorDecodeError(f"Invalid JSON: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, selector: Stringifiable) -> str:
        """Serialize a selector to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(selector),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str) -> Stringifiable:
        """Deserialize a selector from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            logger.debug("YAML decode failed: %s", exc)
            raise SelectorDecodeError(f"Invalid YAML: {exc}") from exc
        return self.from_dict(data)
