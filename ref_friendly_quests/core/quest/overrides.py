"""오버라이드 문서 — 퀘스트 ID → 교체용 완료 조건

db/quests.json 형식:
    {"<quest_id>": {"AvailableForFinish": [ ...QuestCondition... ]}, ...}
"""

from __future__ import annotations

from typing import Iterable

from pydantic import TypeAdapter

from ref_friendly_quests.core.constants import RefQuests
from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.core.quest.enums import WeaponCategory
from ref_friendly_quests.db.models import QuestCondition, QuestConditions, Quest

logger = get_logger(__name__)

OverrideDocument = dict[str, QuestConditions]

OVERRIDE_DOCUMENT_ADAPTER = TypeAdapter(OverrideDocument)

WEAPON_QUEST_ID = RefQuests.AGAINST_THE_CONSCIENCE_P2


def validate_override_document(
    document: OverrideDocument,
    quest_ids: Iterable[str] = RefQuests.TO_EDIT,
) -> None:
    """로드 직후 구조 검증. 위반 시 KeyError / IndexError.

    1. 교체 대상 퀘스트가 모두 존재
    2. 각 퀘스트에 완료 조건이 1개 이상
    3. 무기 퀘스트는 슬롯 6개, 각 슬롯에 counter.conditions[0] 존재
    """
    for quest_id in quest_ids:
        if quest_id not in document:
            raise KeyError(f"Override document missing quest: {quest_id}")
        if not document[quest_id].available_for_finish:
            raise IndexError(f"Override quest has no finish conditions: {quest_id}")

    for category in WeaponCategory:
        weapon_condition(document, category)


def finish_condition(
    document: OverrideDocument, quest_id: str, index: int = 0
) -> QuestCondition:
    conditions = document[quest_id].available_for_finish
    if index >= len(conditions):
        raise IndexError(
            f"Override quest {quest_id} has {len(conditions)} finish conditions, "
            f"index {index} requested"
        )
    return conditions[index]


def weapon_condition(
    document: OverrideDocument, category: WeaponCategory
) -> QuestCondition:
    """카테고리 슬롯의 완료 조건. counter 구조까지 확인."""
    condition = finish_condition(document, WEAPON_QUEST_ID, category.slot)
    if condition.counter is None or not condition.counter.conditions:
        raise IndexError(
            f"Weapon slot {category.value} ({condition.id}) has no counter condition"
        )
    return condition


def weapon_targets(document: OverrideDocument, category: WeaponCategory) -> list[str]:
    """카테고리 슬롯의 weapon 리스트 (원본 참조, 수정 가능)."""
    return weapon_condition(document, category).counter.conditions[0].weapon


def replace_finish_conditions(
    quests: dict[str, Quest],
    document: OverrideDocument,
    quest_ids: Iterable[str] = RefQuests.TO_EDIT,
) -> int:
    """완료 조건 전체 교체 (merge 아님). 반환: 교체한 퀘스트 수."""
    count = 0
    for quest_id in quest_ids:
        quest = quests[quest_id]
        quest.conditions.available_for_finish = document[quest_id].available_for_finish
        count += 1
        logger.debug(
            "Replaced finish conditions: %s (%d conditions)",
            quest_id,
            len(quest.conditions.available_for_finish),
        )
    logger.info("Replaced finish conditions on %d quests", count)
    return count
