"""Wizard configuration.

Defaults mirror the production demand form. Deployments may override a
few values through environment variables (see ``WizardConfig.from_env``).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WizardConfig:
    """Immutable configuration for one wizard session."""

    title_min_length: int = 5
    description_min_length: int = 20

    title_too_short: str = "标题至少需要5个字符"
    description_too_short: str = "需求描述至少需要20个字符"

    success_destination: str = "/dashboard/demands"

    success_title: str = "需求提交成功"
    success_detail: str = "我们将尽快为您匹配合适的企业"
    failure_title: str = "提交失败"
    failure_default_detail: str = "请稍后重试"
    error_title: str = "发生错误"
    error_detail: str = "提交需求时发生错误，请稍后重试"

    unspecified_label: str = "未指定"

    @classmethod
    def from_env(cls) -> "WizardConfig":
        """Build a config, applying ``DEMAND_*`` environment overrides."""
        config = cls()
        overrides = {}

        destination = os.environ.get("DEMAND_SUCCESS_DESTINATION", "").strip()
        if destination:
            overrides["success_destination"] = destination

        for env_name, attr in (
            ("DEMAND_TITLE_MIN_LENGTH", "title_min_length"),
            ("DEMAND_DESCRIPTION_MIN_LENGTH", "description_min_length"),
        ):
            raw = os.environ.get(env_name, "").strip()
            if not raw:
                continue
            try:
                value = int(raw)
            except ValueError:
                logger.warning("Ignoring %s=%r (not an integer)", env_name, raw)
                continue
            if value < 0:
                logger.warning("Ignoring %s=%d (negative)", env_name, value)
                continue
            overrides[attr] = value

        if overrides:
            logger.info("Wizard config overrides: %s", sorted(overrides))
            config = replace(config, **overrides)
        return config
