"""Ref Friendly Quests Core — 순수 Python, 호스트 테이블만 조작"""
__version__ = "2.0.3"

from ref_friendly_quests.core.constants import (
    BaseClasses,
    ItemTpl,
    RefQuests,
    RewardOutcome,
    RewardType,
    Traders,
)
from ref_friendly_quests.core.loyalty import set_min_standing

__all__ = [
    "BaseClasses",
    "ItemTpl",
    "RefQuests",
    "RewardOutcome",
    "RewardType",
    "Traders",
    "set_min_standing",
]
