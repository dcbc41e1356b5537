#!/usr/bin/env python3
"""Example: Quickstart — cssb

Minimal working example: build compound selectors, combine them,
round-trip them through JSON, and see the ordering rules reject a
malformed chain.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install cssb
"""
from __future__ import annotations

import cssb
from cssb.serializer import SelectorSerializer


def main() -> None:
    print(f"cssb version: {cssb.__version__}")

    # Step 1: Build compound selectors
    card = cssb.element("div").id("main").class_("card").class_("draggable")
    link = cssb.element("a").attr('href$=".png"').pseudo_class("focus")
    print(f"Compound: {card.stringify()}")
    print(f"Compound: {link.stringify()}")

    # Step 2: Combine them
    combined = cssb.combine(card, ">", link)
    print(f"Combined: {combined.stringify()}")

    # Step 3: Round-trip through JSON
    serializer = SelectorSerializer()
    restored = serializer.from_json(serializer.to_json(combined))
    print(f"Restored: {restored.stringify()}")

    # Step 4: Rule violations raise immediately
    try:
        cssb.element("div").class_("box").element("span")
    except cssb.OrderViolationError as exc:
        print(f"Rejected: {exc}")
    try:
        cssb.id("a").id("b")
    except cssb.DuplicateSingletonError as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
