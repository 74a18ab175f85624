"""
CSS Selector Builder

Fluent construction of CSS-like selector strings.

A compound selector is made of element, id, class, attribute,
pseudo-class and pseudo-element parts:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Compound selectors can be joined with the combinators ' ', '+', '~', '>'.

ARCHITECTURAL RULE:
    Every call chain owns its own Selector instance.
    The facade (css_selector_builder) never holds accumulation state,
    so independent or nested chains cannot leak fragments into each other.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class SelectorError(Exception):
    """Base class for selector construction errors."""
    pass


class DuplicateSelectorError(SelectorError):
    """Raised when element, id or pseudo-element is appended twice."""
    pass


class OrderError(SelectorError):
    """Raised when selector parts are appended out of category order."""
    pass


class SelectorCategory(Enum):
    """
    Selector part categories.

    The value is the category rank. Inside one compound selector the
    ranks of appended parts must never decrease.
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    def format(self, value: str) -> str:
        """Render a raw value with this category's CSS syntax."""
        return _TEMPLATES[self].format(value)


_LABELS = {
    SelectorCategory.ELEMENT: "element",
    SelectorCategory.ID: "id",
    SelectorCategory.CLASS: "class",
    SelectorCategory.ATTRIBUTE: "attribute",
    SelectorCategory.PSEUDO_CLASS: "pseudo-class",
    SelectorCategory.PSEUDO_ELEMENT: "pseudo-element",
}

_TEMPLATES = {
    SelectorCategory.ELEMENT: "{}",
    SelectorCategory.ID: "#{}",
    SelectorCategory.CLASS: ".{}",
    SelectorCategory.ATTRIBUTE: "[{}]",
    SelectorCategory.PSEUDO_CLASS: ":{}",
    SelectorCategory.PSEUDO_ELEMENT: "::{}",
}

# Categories allowed at most once per compound selector
UNIQUE_CATEGORIES = frozenset({
    SelectorCategory.ELEMENT,
    SelectorCategory.ID,
    SelectorCategory.PSEUDO_ELEMENT,
})

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(category.label for category in SelectorCategory)
)


class Combinator(Enum):
    """Combinator tokens joining two selectors."""
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


@dataclass(frozen=True)
class Fragment:
    """
    One part of a compound selector.

    Properties:
        category: SelectorCategory of this part (carries its rank)
        value: Raw value as passed by the caller (e.g. "main")

    The rendered text (e.g. "#main") is derived, never stored.
    """

    category: SelectorCategory
    value: str

    @property
    def text(self) -> str:
        return self.category.format(self.value)


@dataclass
class Selector:
    """
    A compound selector under construction.

    Every append method returns the selector itself so calls chain:

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    State machine:
        Empty -> append -> Accumulating -> stringify() -> Empty

    A failed append raises DuplicateSelectorError or OrderError and
    clears all accumulated fragments.

    Properties:
        fragments: Appended parts, in call order
    """

    fragments: List[Fragment] = field(default_factory=list)

    def append(self, category: SelectorCategory, value: str) -> Selector:
        """
        Append a part of the given category.

        Args:
            category: Category of the new part
            value: Raw value, rendered with the category's syntax

        Returns:
            self

        Raises:
            DuplicateSelectorError: category is unique and already present
            OrderError: a higher-ranked part was already appended
        """
        if not value:
            warnings.warn(f"Empty value for {category.label} selector", UserWarning)

        if category in UNIQUE_CATEGORIES and self.has(category):
            self.reset()
            raise DuplicateSelectorError(DUPLICATE_MESSAGE)

        if self.fragments and self.fragments[-1].category.value > category.value:
            self.reset()
            raise OrderError(ORDER_MESSAGE)

        self.fragments.append(Fragment(category=category, value=value))
        return self

    def element(self, value: str) -> Selector:
        return self.append(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(SelectorCategory.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(SelectorCategory.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(SelectorCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(SelectorCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(SelectorCategory.PSEUDO_ELEMENT, value)

    def has(self, category: SelectorCategory) -> bool:
        return any(fragment.category is category for fragment in self.fragments)

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def render(self) -> str:
        """Render without touching the accumulated state."""
        return "".join(fragment.text for fragment in self.fragments)

    def stringify(self) -> str:
        """Render the selector, then reset it to Empty."""
        result = self.render()
        self.reset()
        return result

    def reset(self) -> None:
        self.fragments = []

    def __str__(self) -> str:
        return self.render()


@dataclass
class CombinedSelector:
    """
    Two rendered selectors joined by a combinator.

    Rendered as "<right> <combinator> <left>": the right operand
    comes first. Operands are stored as already-rendered text, so a
    CombinedSelector is itself a valid operand of a further combination.

    Properties:
        left: Rendered text of the left operand
        combinator: Combinator token, None once the combination is reset
        right: Rendered text of the right operand
    """

    left: str
    combinator: Optional[Combinator]
    right: str

    @property
    def is_empty(self) -> bool:
        return self.combinator is None

    def render(self) -> str:
        if self.is_empty:
            return ""
        return f"{self.right} {self.combinator.value} {self.left}"

    def stringify(self) -> str:
        """Render the combination, then reset it to Empty."""
        result = self.render()
        self.reset()
        return result

    def reset(self) -> None:
        self.left = ""
        self.combinator = None
        self.right = ""

    def __str__(self) -> str:
        return self.render()


SelectorLike = Union[Selector, CombinedSelector, str]


def render_operand(operand: SelectorLike) -> str:
    """Render a combine() operand without resetting it."""
    if isinstance(operand, str):
        return operand
    if isinstance(operand, (Selector, CombinedSelector)):
        return operand.render()
    raise TypeError(f"Unsupported selector operand: {type(operand)}")


def combine(
    left: SelectorLike,
    combinator: Union[Combinator, str],
    right: SelectorLike,
) -> CombinedSelector:
    """
    Join two selectors with a combinator.

    Args:
        left: Selector, CombinedSelector or rendered text
        combinator: Combinator or one of ' ', '+', '~', '>'
        right: Selector, CombinedSelector or rendered text

    Returns:
        CombinedSelector rendering as "<right> <combinator> <left>"

    Raises:
        ValueError: combinator is not one of the four tokens
        TypeError: an operand is not selector-like
    """
    return CombinedSelector(
        left=render_operand(left),
        combinator=Combinator(combinator),
        right=render_operand(right),
    )


class CssSelectorBuilder:
    """
    Stateless facade starting a fresh Selector per call chain.

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(
        self,
        left: SelectorLike,
        combinator: Union[Combinator, str],
        right: SelectorLike,
    ) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()


__all__ = [
    "SelectorError",
    "DuplicateSelectorError",
    "OrderError",
    "SelectorCategory",
    "Combinator",
    "Fragment",
    "Selector",
    "CombinedSelector",
    "combine",
    "render_operand",
    "CssSelectorBuilder",
    "css_selector_builder",
]
