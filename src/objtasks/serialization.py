"""
Serialization helpers for objtasks objects.

Two families:
    - get_json / from_json: generic object <-> JSON text helpers
    - selector_* : explicit dict/JSON/YAML round-trip for selectors

Selector restoration goes back through the builder, so a document that
describes an invalid selector raises the builder's own errors.
"""
from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, Type, TypeVar, Union

import yaml

from objtasks.selectors import (
    Combinator,
    CombinedSelector,
    Fragment,
    Selector,
    SelectorCategory,
)

T = TypeVar("T")


def _encode_default(o: Any) -> Any:
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return dataclasses.asdict(o)
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of obj.

    Dataclass instances are encoded as their field dict at any depth;
    methods such as Rectangle.get_area are behavior, not data, and are
    not encoded.

    Examples:
        [1, 2, 3]            => '[1,2,3]'
        Rectangle(10, 20)    => '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_encode_default)


def from_json(cls: Type[T], text: str) -> T:
    """
    Build an instance of cls from JSON text.

    An object's values are passed to cls positionally, in document
    order; an array is passed item by item:

        from_json(Circle, '{"radius": 10}')  # => Circle(radius=10)
        from_json(Rectangle, "[10, 20]")    # => Rectangle(width=10, height=20)
    """
    d = json.loads(text)
    if isinstance(d, dict):
        return cls(*d.values())
    if isinstance(d, list):
        return cls(*d)
    raise TypeError(f"Cannot build {cls.__name__} from JSON {type(d).__name__}")


def fragment_to_dict(f: Fragment) -> Dict[str, Any]:
    return {"category": f.category.name, "value": f.value}


def fragment_from_dict(d: Dict[str, Any]) -> Fragment:
    return Fragment(category=SelectorCategory[d["category"]], value=d["value"])


def selector_to_dict(s: Union[Selector, CombinedSelector]) -> Dict[str, Any]:
    if isinstance(s, Selector):
        return {
            "type": "compound",
            "fragments": [fragment_to_dict(f) for f in s.fragments],
        }
    if isinstance(s, CombinedSelector):
        return {
            "type": "combined",
            "left": s.left,
            "combinator": s.combinator.value if s.combinator else None,
            "right": s.right,
        }
    raise TypeError(f"Unsupported selector type: {type(s)}")


def selector_from_dict(d: Dict[str, Any]) -> Union[Selector, CombinedSelector]:
    t = d.get("type")
    if t == "compound":
        s = Selector()
        for fd in d.get("fragments", []):
            f = fragment_from_dict(fd)
            s.append(f.category, f.value)
        return s
    if t == "combined":
        return CombinedSelector(
            left=d.get("left", ""),
            combinator=Combinator(d["combinator"]) if d.get("combinator") else None,
            right=d.get("right", ""),
        )
    raise TypeError(f"Unsupported selector dict type: {t}")


def selector_to_json(s: Union[Selector, CombinedSelector]) -> str:
    return json.dumps(selector_to_dict(s), sort_keys=True)


def selector_from_json(s: str) -> Union[Selector, CombinedSelector]:
    d = json.loads(s)
    return selector_from_dict(d)


def selector_to_yaml(s: Union[Selector, CombinedSelector]) -> str:
    return yaml.safe_dump(selector_to_dict(s))


def selector_from_yaml(s: str) -> Union[Selector, CombinedSelector]:
    d = yaml.safe_load(s)
    return selector_from_dict(d)
