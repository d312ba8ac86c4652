"""완료 조건 표시 문자열 패치"""

from __future__ import annotations

from typing import Callable, Optional

from ref_friendly_quests.core.constants import RefQuests
from ref_friendly_quests.core.quest.enums import WeaponCategory
from ref_friendly_quests.core.quest.overrides import (
    OverrideDocument,
    finish_condition,
    weapon_condition,
)

LocaleData = Optional[dict[str, str]]

PMC_KILL_TEXTS: tuple[tuple[str, str], ...] = (
    (RefQuests.TO_GREAT_HEIGHTS_P1, "Eliminate 10 PMCs"),
    (RefQuests.TO_GREAT_HEIGHTS_P2, "Eliminate 15 PMCs"),
    (RefQuests.TO_GREAT_HEIGHTS_P3, "Eliminate 25 PMCs"),
    (RefQuests.TO_GREAT_HEIGHTS_P4, "Eliminate 50 PMCs"),
    (RefQuests.TO_GREAT_HEIGHTS_P5, "Eliminate 75 PMCs"),
)

WEAPON_KILL_TEXTS: dict[WeaponCategory, str] = {
    WeaponCategory.CARBINE: "Eliminate any 50 targets with Assault Carbines",
    WeaponCategory.RIFLE: "Eliminate any 50 targets with Assault Rifles",
    WeaponCategory.MACHINE_GUN: "Eliminate any 50 targets with LMGs",
    WeaponCategory.MARKSMAN_RIFLE: "Eliminate any 50 targets with Marksman Rifles",
    WeaponCategory.SHOTGUN: "Eliminate any 50 targets with Shotguns",
    WeaponCategory.SMG: "Eliminate any 50 targets with SMGs",
}


def build_locale_overrides(document: OverrideDocument) -> dict[str, str]:
    """조건 ID → 표시 문자열. 등록 시점에 한 번 계산."""
    overrides: dict[str, str] = {}
    for quest_id, text in PMC_KILL_TEXTS:
        overrides[finish_condition(document, quest_id).id] = text
    for category, text in WEAPON_KILL_TEXTS.items():
        overrides[weapon_condition(document, category).id] = text
    return overrides


def make_locale_transformer(
    overrides: dict[str, str],
) -> Callable[[LocaleData], LocaleData]:
    """순수 변환기 생성. None은 그대로 반환, 그 외엔 키를 덮어쓴 사본 반환."""
    fixed = dict(overrides)

    def transform(locale_data: LocaleData) -> LocaleData:
        if locale_data is None:
            return None
        patched = dict(locale_data)
        patched.update(fixed)
        return patched

    return transform
