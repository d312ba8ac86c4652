"""퀘스트 패치 관련 열거형"""

from enum import Enum

from ref_friendly_quests.core.constants import BaseClasses


class WeaponCategory(str, Enum):
    """Against the Conscience p2 무기 슬롯.

    정의 순서 = 분류 우선순위 = 완료 조건 슬롯 인덱스.
    """

    CARBINE = "carbine"
    RIFLE = "rifle"
    MACHINE_GUN = "machine_gun"
    MARKSMAN_RIFLE = "marksman_rifle"
    SHOTGUN = "shotgun"
    SMG = "smg"

    @property
    def slot(self) -> int:
        return list(WeaponCategory).index(self)

    @property
    def base_class(self) -> str:
        return _BASE_CLASSES[self]


_BASE_CLASSES = {
    WeaponCategory.CARBINE: BaseClasses.ASSAULT_CARBINE,
    WeaponCategory.RIFLE: BaseClasses.ASSAULT_RIFLE,
    WeaponCategory.MACHINE_GUN: BaseClasses.MACHINE_GUN,
    WeaponCategory.MARKSMAN_RIFLE: BaseClasses.MARKSMAN_RIFLE,
    WeaponCategory.SHOTGUN: BaseClasses.SHOTGUN,
    WeaponCategory.SMG: BaseClasses.SMG,
}
