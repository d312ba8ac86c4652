"""무기 분류 패스 — 아이템 카탈로그를 6개 무기 슬롯에 배분"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.core.quest.enums import WeaponCategory
from ref_friendly_quests.core.quest.overrides import OverrideDocument, weapon_targets

logger = get_logger(__name__)

# (item_id, base_class_id) -> bool
BaseClassPredicate = Callable[[str, str], bool]


def classify_item(
    item_id: str, is_of_base_class: BaseClassPredicate
) -> Optional[WeaponCategory]:
    """우선순위 순으로 검사, 첫 매칭 카테고리 반환. 이후 카테고리는 검사하지 않음."""
    for category in WeaponCategory:
        if is_of_base_class(item_id, category.base_class):
            return category
    return None


def classify_weapons(
    item_ids: Iterable[str],
    is_of_base_class: BaseClassPredicate,
    document: OverrideDocument,
) -> dict[WeaponCategory, int]:
    """각 아이템을 최대 한 슬롯에 추가. 이미 있는 ID는 건너뜀.

    Returns: {카테고리: 새로 추가된 수}
    """
    targets = {category: weapon_targets(document, category) for category in WeaponCategory}
    added = {category: 0 for category in WeaponCategory}

    for item_id in item_ids:
        category = classify_item(item_id, is_of_base_class)
        if category is None:
            continue
        slot = targets[category]
        if item_id in slot:
            continue
        slot.append(item_id)
        added[category] += 1

    logger.info(
        "Classified weapons: %s",
        ", ".join(f"{c.value}={n}" for c, n in added.items()),
    )
    return added
