"""퀘스트 패치 Core 패키지"""

from ref_friendly_quests.core.quest.enums import WeaponCategory
from ref_friendly_quests.core.quest.overrides import (
    OVERRIDE_DOCUMENT_ADAPTER,
    OverrideDocument,
    finish_condition,
    replace_finish_conditions,
    validate_override_document,
    weapon_condition,
    weapon_targets,
)
from ref_friendly_quests.core.quest.classifier import classify_item, classify_weapons
from ref_friendly_quests.core.quest.locales import (
    build_locale_overrides,
    make_locale_transformer,
)
from ref_friendly_quests.core.quest.rewards import (
    CurrencyRescaler,
    add_bonus_reward,
    add_bonus_rewards,
    find_reward_index,
    make_lega_medal_reward,
)

__all__ = [
    "WeaponCategory",
    "OVERRIDE_DOCUMENT_ADAPTER",
    "OverrideDocument",
    "finish_condition",
    "replace_finish_conditions",
    "validate_override_document",
    "weapon_condition",
    "weapon_targets",
    "classify_item",
    "classify_weapons",
    "build_locale_overrides",
    "make_locale_transformer",
    "CurrencyRescaler",
    "add_bonus_reward",
    "add_bonus_rewards",
    "find_reward_index",
    "make_lega_medal_reward",
]
