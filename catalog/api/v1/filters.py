"""Query-string parsing for category item filters and order listing.

Category items accept:

- ``filter[<name>]=a,b``            -> {name: ["a", "b"]}
- ``filter[<name>][min]=1``         -> {name: {"min": "1", ...}}
- ``filter[<name>][max]=9``         -> {name: {..., "max": "9"}}
- ``min_price=10`` / ``max_price=20`` -> {"min_price": 10.0, ...}

Malformed keys raise ValidationException (400) before any service call.
"""

import re
from collections.abc import Iterable
from typing import Any

from catalog.domain.enums import OrderStatus
from catalog.domain.exceptions import ValidationException

FILTER_PARAM_RE = re.compile(r"^filter\[([^\[\]]+)\](?:\[(min|max)\])?$")
PRICE_PARAMS = ("min_price", "max_price")


def _split_values(raw: str) -> list[str]:
    return [v.strip() for v in raw.split(",") if v.strip()]


def parse_item_filters(params: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Build the category filter map from query (key, value) pairs.

    Raises:
        ValidationException: On an unknown ``filter[...]`` shape, a name used
            both as a list and a range, a ``filter[...]`` named like a price
            bound, or a non-numeric price bound.
    """
    filters: dict[str, Any] = {}
    for key, raw in params:
        if key in PRICE_PARAMS:
            try:
                filters[key] = float(raw)
            except ValueError:
                raise ValidationException(f"{key} must be a number", field=key) from None
            continue
        if not key.startswith("filter"):
            continue
        match = FILTER_PARAM_RE.match(key)
        if match is None:
            raise ValidationException(f"Malformed filter parameter: {key}", field=key)
        name, bound = match.group(1), match.group(2)
        if name in PRICE_PARAMS:
            raise ValidationException(
                f"{name} is a price bound, pass it as ?{name}=<number>", field=key
            )
        current = filters.get(name)
        if bound is None:
            if isinstance(current, dict):
                raise ValidationException(
                    f"Filter {name!r} cannot be both a list and a range", field=key
                )
            filters[name] = (current or []) + _split_values(raw)
        else:
            if isinstance(current, list):
                raise ValidationException(
                    f"Filter {name!r} cannot be both a list and a range", field=key
                )
            filters.setdefault(name, {})[bound] = raw.strip()
    return filters


def parse_order_filters(status: str | None, user_id: str | None) -> dict[str, Any]:
    """Admin order list filters: comma-separated statuses and a user id."""
    filters: dict[str, Any] = {}
    if status:
        statuses = _split_values(status)
        unknown = [s for s in statuses if s not in OrderStatus.values()]
        if unknown:
            raise ValidationException(f"Unknown order status: {', '.join(unknown)}", field="status")
        filters["status"] = statuses
    if user_id:
        filters["user_id"] = user_id
    return filters
