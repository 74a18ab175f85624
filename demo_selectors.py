#!/usr/bin/env python3
"""
Demo: Build CSS selectors and round-trip shapes through JSON.
"""

from objtasks.examples import (
    build_example_combined_selector,
    build_example_selectors,
    build_example_shapes,
)
from objtasks.model import Rectangle
from objtasks.serialization import from_json, get_json, selector_to_yaml


def main():
    print("=" * 80)
    print("SELECTOR BUILDER DEMO")
    print("=" * 80)

    for selector in build_example_selectors():
        print(f"  {selector.stringify()}")

    combined = build_example_combined_selector()
    print("\nCOMBINED:")
    print("-" * 80)
    print(selector_to_yaml(combined))
    print(f"  {combined.stringify()}")

    print("\n" + "=" * 80)
    print("JSON DEMO")
    print("=" * 80)

    for name, shape in build_example_shapes().items():
        text = get_json(shape)
        restored = from_json(type(shape), text)
        print(f"  {name}: {text} -> area {restored.get_area():.2f}")

    print(f"  {get_json([1, 2, 3])}")
    square = from_json(Rectangle, '{"width": 3, "height": 3}')
    print(f"  {square} -> area {square.get_area()}")


if __name__ == "__main__":
    main()
