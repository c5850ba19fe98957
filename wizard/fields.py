"""Demand fields and the store that holds their current values."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from .base import UnknownFieldError

# Ordered as they are collected by the wizard.
FIELD_NAMES: Tuple[str, ...] = (
    "title",
    "description",
    "category",
    "budget",
    "timeline",
    "cooperationType",
)

REQUIRED_FIELDS: Tuple[str, ...] = ("title", "description")

FIELD_LABELS: Dict[str, str] = {
    "title": "需求标题",
    "description": "需求详细描述",
    "category": "需求分类",
    "budget": "预算范围",
    "timeline": "工期要求",
    "cooperationType": "合作类型",
}

# ---------------------------------------------------------------------------
# Option catalogs (informational; values stay free-form)
# ---------------------------------------------------------------------------

CATEGORY_OPTIONS: List[str] = [
    "智慧城市",
    "新能源",
    "无人机",
    "能源管理",
    "人工智能",
    "软件开发",
    "硬件制造",
    "其他",
]

BUDGET_OPTIONS: List[Dict[str, str]] = [
    {"value": "低于5万", "label": "低于5万", "amount": "< 5万"},
    {"value": "5-20万", "label": "5-20万", "amount": "5-20万"},
    {"value": "20-50万", "label": "20-50万", "amount": "20-50万"},
    {"value": "50-100万", "label": "50-100万", "amount": "50-100万"},
    {"value": "100-500万", "label": "100-500万", "amount": "100-500万"},
    {"value": "500万以上", "label": "500万以上", "amount": "> 500万"},
]

TIMELINE_OPTIONS: List[Dict[str, str]] = [
    {"value": "少于1个月", "label": "少于1个月"},
    {"value": "1-3个月", "label": "1-3个月"},
    {"value": "3-6个月", "label": "3-6个月"},
    {"value": "6-12个月", "label": "6-12个月"},
    {"value": "1年以上", "label": "1年以上"},
]

COOPERATION_TYPE_OPTIONS: List[Dict[str, str]] = [
    {"value": "项目外包", "label": "项目外包", "description": "整体项目委托给合作方完成"},
    {"value": "技术合作", "label": "技术合作", "description": "共同开发技术方案"},
    {"value": "联合研发", "label": "联合研发", "description": "双方共同投入资源研发"},
    {"value": "股权合作", "label": "股权合作", "description": "深度合作，包含股权激励"},
    {"value": "其他", "label": "其他", "description": "其他形式的合作方式"},
]


def get_field_options() -> Dict[str, list]:
    """Return the option catalogs keyed by field name."""
    return {
        "category": CATEGORY_OPTIONS,
        "budget": BUDGET_OPTIONS,
        "timeline": TIMELINE_OPTIONS,
        "cooperationType": COOPERATION_TYPE_OPTIONS,
    }


def _check_name(name: str) -> None:
    if name not in FIELD_NAMES:
        raise UnknownFieldError(name)


class FieldStore:
    """Current demand field values, keyed by field name.

    Pure storage: no validation happens here. Every field starts out as
    the empty string, which is how an unset optional field is represented.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = {name: "" for name in FIELD_NAMES}
        if values:
            for name, value in values.items():
                self.set(name, value)

    def set(self, name: str, value: Optional[str]) -> None:
        """Overwrite exactly one field, leaving all others untouched."""
        _check_name(name)
        self._values[name] = "" if value is None else str(value)

    def get(self, name: str) -> str:
        _check_name(name)
        return self._values[name]

    def get_all(self) -> Dict[str, str]:
        """Return a snapshot; mutating it does not affect the store."""
        return dict(self._values)

    def update(self, values: Mapping[str, Optional[str]]) -> None:
        """Set several fields. Names are checked before anything is written."""
        for name in values:
            _check_name(name)
        for name, value in values.items():
            self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        filled = [name for name, value in self._values.items() if value]
        return f"FieldStore(filled={filled})"
