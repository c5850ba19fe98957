"""Example demand templates and the applier that prefills the form."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .base import ExampleProvider, UnknownFieldError
from .fields import FIELD_NAMES
from .state import MODE_FORM, WizardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Example:
    """A labelled, partial set of demand field values."""

    id: str
    label: str
    values: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in self.values:
            if name not in FIELD_NAMES:
                raise UnknownFieldError(name)

    def present_values(self) -> Dict[str, str]:
        """Return only the fields this example actually sets."""
        return {name: value for name, value in self.values.items() if value}

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "values": dict(self.values)}


# ---------------------------------------------------------------------------
# Built-in catalog
# ---------------------------------------------------------------------------

EXAMPLE_CATALOG: List[Example] = [
    Example(
        id="smart-streetlight",
        label="智慧路灯系统",
        values={"title": "智慧路灯系统", "budget": "5-20万"},
    ),
    Example(
        id="enterprise-website",
        label="企业官网开发",
        values={
            "title": "需要开发一个企业官网",
            "description": "公司需要一个响应式企业官网，包含产品展示、新闻动态、在线留言和后台内容管理功能。",
            "category": "软件开发",
            "budget": "低于5万",
            "timeline": "1-3个月",
            "cooperationType": "项目外包",
        },
    ),
    Example(
        id="drone-inspection",
        label="无人机电力巡检",
        values={
            "title": "无人机电力巡检方案",
            "description": "希望引入无人机对输电线路进行自动巡检，需支持航线规划、缺陷图像识别和巡检报告生成。",
            "category": "无人机",
            "budget": "50-100万",
            "timeline": "3-6个月",
            "cooperationType": "技术合作",
        },
    ),
    Example(
        id="energy-dashboard",
        label="园区能耗管理平台",
        values={
            "title": "园区能耗监测与管理平台",
            "description": "为工业园区建设能耗监测平台，接入水电气表计数据，提供实时看板、异常告警和节能分析。",
            "category": "能源管理",
            "timeline": "6-12个月",
        },
    ),
    Example(
        id="ai-customer-service",
        label="智能客服",
        values={
            "title": "智能客服系统联合研发",
            "description": "基于大模型构建行业智能客服，支持知识库问答、工单流转和多渠道接入，希望双方共同投入研发。",
            "category": "人工智能",
            "budget": "100-500万",
            "cooperationType": "联合研发",
        },
    ),
]


class StaticExampleProvider(ExampleProvider):
    """Serves a fixed list of examples (the built-in catalog by default)."""

    def __init__(self, examples: Optional[Sequence[Example]] = None):
        self._examples = list(EXAMPLE_CATALOG if examples is None else examples)

    def list_examples(self) -> List[Example]:
        return list(self._examples)


class ExampleApplier:
    """Merges example templates into the session's field store.

    Only fields the example sets (non-empty) are overwritten; anything the
    example leaves out keeps its current value. Applying or skipping both
    switch the session to form mode.
    """

    def __init__(self, state: WizardState):
        self._state = state

    def apply(self, example: Example) -> Dict[str, str]:
        """Prefill from ``example`` and return the fields that were written."""
        written = example.present_values()
        self._state.fields.update(written)
        self._state.active_mode = MODE_FORM
        logger.info("Applied example %s (%s)", example.id, ", ".join(written) or "no fields")
        return written

    def skip(self) -> None:
        self._state.active_mode = MODE_FORM
        logger.debug("Example selection skipped")
