"""
Example selectors and shapes for the exercises.

Builds the documented selectors with fresh builders, plus a nested
four-level combination and a pair of shapes for the JSON helpers.
"""
from typing import Dict, List

from objtasks.model import Circle, Rectangle
from objtasks.selectors import CombinedSelector, Selector, css_selector_builder


def build_example_selectors() -> List[Selector]:
    builder = css_selector_builder

    return [
        builder.id("main").class_("container").class_("editable"),
        builder.element("a").attr('href$=".png"').pseudo_class("focus"),
        builder.element("p").pseudo_element("first-line"),
    ]


def build_example_combined_selector() -> CombinedSelector:
    builder = css_selector_builder

    # Innermost pair: even rows and their even cells
    rows_and_cells = builder.combine(
        builder.element("tr").pseudo_class("nth-of-type(even)"),
        " ",
        builder.element("td").pseudo_class("nth-of-type(even)"),
    )
    table = builder.combine(
        builder.element("table").id("data"),
        "~",
        rows_and_cells,
    )
    return builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        table,
    )


def build_example_shapes() -> Dict[str, object]:
    return {
        "rectangle": Rectangle(10, 20),
        "circle": Circle(10),
    }
