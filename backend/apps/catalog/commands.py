from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from .dtos import FilterCriteria, InvalidFilterCriteria
from .filters import FEATURED

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _blank_to_none(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


def _get_list(params: Mapping[str, Any], key: str) -> List[str]:
    getlist = getattr(params, "getlist", None)
    raw = getlist(key) if callable(getlist) else params.get(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [raw]
    out: List[str] = []
    for value in raw:
        for part in str(value).split(","):
            part = part.strip()
            if part and part not in out:
                out.append(part)
    return out


def _parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise InvalidFilterCriteria(field_name, value, f"{field_name} must be true or false")


@dataclass
class FilterCommand:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort_key: str = FEATURED

    @staticmethod
    def from_raw(params: Optional[Mapping[str, Any]]):
        params = params or {}
        low = _blank_to_none(params.get("minPrice"))
        high = _blank_to_none(params.get("maxPrice"))
        price_range = None if low is None and high is None else (low, high)
        in_stock_raw = params.get("inStock")
        criteria = FilterCriteria(
            type_filter=str(params.get("type") or "all").strip().lower(),
            search_text=str(params.get("q") or params.get("search") or ""),
            price_range=price_range,
            categories=frozenset(_get_list(params, "category")),
            in_stock_only=(
                _parse_bool(in_stock_raw, "inStock") if in_stock_raw is not None else False
            ),
        )
        sort_key = str(params.get("sort") or FEATURED).strip().lower()
        return FilterCommand(criteria=criteria, sort_key=sort_key)
