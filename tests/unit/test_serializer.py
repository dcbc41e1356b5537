"""Unit tests for cssb.serializer — SelectorSerializer."""
from __future__ import annotations

import json

import pytest
import yaml

from cssb.facade import SelectorBuilder
from cssb.selectors import CombinedSelector, CompoundSelector
from cssb.serializer import SelectorSerializer
from cssb.validator import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorDecodeError,
)


@pytest.fixture()
def serializer() -> SelectorSerializer:
    return SelectorSerializer()


def _sample(builder: SelectorBuilder) -> CombinedSelector:
    return builder.combine(
        builder.element("div"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.element("tr").attr("data-row").pseudo_class("nth-of-type(even)"),
        ),
    )


# ---------------------------------------------------------------------------
# to_dict
# ---------------------------------------------------------------------------


class TestToDict:
    def test_compound(self, serializer: SelectorSerializer, builder: SelectorBuilder) -> None:
        data = serializer.to_dict(builder.element("a").attr('href$=".png"'))
        assert data == {
            "kind": "CompoundSelector",
            "fragments": [
                {"kind": "element", "value": "a"},
                {"kind": "attribute", "value": 'href$=".png"'},
            ],
        }

    def test_combined(self, serializer: SelectorSerializer, builder: SelectorBuilder) -> None:
        data = serializer.to_dict(builder.combine(builder.id("a"), ">", builder.class_("b")))
        assert data["kind"] == "CombinedSelector"
        assert data["combinator"] == ">"
        assert data["left"] == {
            "kind": "CompoundSelector",
            "fragments": [{"kind": "id", "value": "a"}],
        }

    def test_empty_compound(self, serializer: SelectorSerializer) -> None:
        assert serializer.to_dict(CompoundSelector()) == {
            "kind": "CompoundSelector",
            "fragments": [],
        }

    def test_unknown_type_raises(self, serializer: SelectorSerializer) -> None:
        class Custom:
            def stringify(self) -> str:
                return "x"

        with pytest.raises(TypeError, match="Unknown selector type"):
            serializer.to_dict(Custom())


# ---------------------------------------------------------------------------
# from_dict
# ---------------------------------------------------------------------------


class TestFromDict:
    def test_round_trip_preserves_text(
        self, serializer: SelectorSerializer, builder: SelectorBuilder
    ) -> None:
        selector = _sample(builder)
        restored = serializer.from_dict(serializer.to_dict(selector))
        assert restored.stringify() == selector.stringify()
        assert isinstance(restored, CombinedSelector)

    def test_rebuilt_compound_tracks_last_kind(self, serializer: SelectorSerializer) -> None:
        restored = serializer.from_dict(
            {
                "kind": "CompoundSelector",
                "fragments": [
                    {"kind": "element", "value": "p"},
                    {"kind": "pseudo-element", "value": "first-line"},
                ],
            }
        )
        assert isinstance(restored, CompoundSelector)
        assert restored.stringify() == "p::first-line"
        with pytest.raises(DuplicateSingletonError):
            restored.pseudo_element("after")

    def test_out_of_order_document_rejected(self, serializer: SelectorSerializer) -> None:
        with pytest.raises(OrderViolationError):
            serializer.from_dict(
                {
                    "kind": "CompoundSelector",
                    "fragments": [
                        {"kind": "class", "value": "x"},
                        {"kind": "element", "value": "div"},
                    ],
                }
            )

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"kind": "Selector"},
            {"kind": "CompoundSelector", "fragments": "div"},
            {"kind": "CompoundSelector", "fragments": [{"kind": "element"}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": "tag", "value": "div"}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": ["id"], "value": "a"}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": {}, "value": "a"}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": "id", "value": None}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": "class", "value": ["a"]}]},
            {"kind": "CompoundSelector", "fragments": [{"kind": "class", "value": 3}]},
            {"kind": "CombinedSelector", "left": {}, "right": {}},
            {
                "kind": "CombinedSelector",
                "left": {"kind": "CompoundSelector", "fragments": []},
                "combinator": 1,
                "right": {"kind": "CompoundSelector", "fragments": []},
            },
        ],
    )
    def test_malformed_documents(self, serializer: SelectorSerializer, data: object) -> None:
        with pytest.raises(SelectorDecodeError):
            serializer.from_dict(data)  # type: ignore[arg-type]

    def test_strict_builder_applies_to_decoding(self, strict_builder: SelectorBuilder) -> None:
        serializer = SelectorSerializer(strict_builder)
        data = {
            "kind": "CombinedSelector",
            "left": {"kind": "CompoundSelector", "fragments": [{"kind": "element", "value": "a"}]},
            "combinator": "||",
            "right": {"kind": "CompoundSelector", "fragments": [{"kind": "element", "value": "b"}]},
        }
        with pytest.raises(InvalidCombinatorError):
            serializer.from_dict(data)
        assert SelectorSerializer().from_dict(data).stringify() == "a || b"


# ---------------------------------------------------------------------------
# JSON / YAML
# ---------------------------------------------------------------------------


class TestTextFormats:
    def test_json_round_trip(self, serializer: SelectorSerializer, builder: SelectorBuilder) -> None:
        selector = _sample(builder)
        text = serializer.to_json(selector)
        assert json.loads(text) == serializer.to_dict(selector)
        assert serializer.from_json(text).stringify() == selector.stringify()

    def test_yaml_round_trip(self, serializer: SelectorSerializer, builder: SelectorBuilder) -> None:
        selector = builder.combine(builder.element("ul"), " ", builder.element("li"))
        text = serializer.to_yaml(selector)
        assert yaml.safe_load(text) == serializer.to_dict(selector)
        assert serializer.from_yaml(text).stringify() == "ul   li"

    def test_yaml_keeps_kind_first(self, serializer: SelectorSerializer, builder: SelectorBuilder) -> None:
        text = serializer.to_yaml(builder.element("p"))
        assert text.startswith("kind: CompoundSelector")

    def test_invalid_json(self, serializer: SelectorSerializer) -> None:
        with pytest.raises(SelectorDecodeError, match="Invalid JSON"):
            serializer.from_json("{not json")

    def test_yaml_null_value_rejected(self, serializer: SelectorSerializer) -> None:
        text = "kind: CompoundSelector\nfragments:\n- kind: id\n  value: null\n"
        with pytest.raises(SelectorDecodeError, match="must be a string"):
            serializer.from_yaml(text)

    def test_json_non_string_kind_rejected(self, serializer: SelectorSerializer) -> None:
        text = '{"kind": "CompoundSelector", "fragments": [{"kind": ["id"], "value": "a"}]}'
        with pytest.raises(SelectorDecodeError, match="Unknown fragment kind"):
            serializer.from_json(text)

    def test_invalid_yaml(self, serializer: SelectorSerializer) -> None:
        with pytest.raises(SelectorDecodeError, match="Invalid YAML"):
            serializer.from_yaml("kind: [unclosed")
