"""호스트 데이터베이스 레코드 (JSON 스키마)

호스트 JSON의 필드명(_id, _tpl, AvailableForFinish ...)을 alias로 읽고 쓴다.
모르는 필드는 extra로 보존한다.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class HostRecord(BaseModel):
    """모든 호스트 레코드의 기반. 알 수 없는 필드 유지."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# === Items ===


class ItemTemplate(HostRecord):
    """아이템 템플릿. _parent 체인으로 분류된다."""

    id: str = Field(..., alias="_id")
    name: str = Field("", alias="_name")
    parent: str = Field("", alias="_parent")
    type: str = Field("Item", alias="_type")  # "Item" | "Node"
    props: dict[str, Any] = Field(default_factory=dict, alias="_props")


# === Quests ===


class CounterCondition(HostRecord):
    """카운터 하위 조건 (예: Kills)"""

    id: str
    condition_type: str = Field("", alias="conditionType")
    target: Any = None
    weapon: list[str] = Field(default_factory=list)


class QuestCounter(HostRecord):
    id: str
    conditions: list[CounterCondition] = Field(default_factory=list)


class QuestCondition(HostRecord):
    """퀘스트 완료 조건 하나"""

    id: str
    condition_type: str = Field("", alias="conditionType")
    value: Optional[float] = None
    counter: Optional[QuestCounter] = None


class QuestConditions(HostRecord):
    available_for_finish: list[QuestCondition] = Field(
        default_factory=list, alias="AvailableForFinish"
    )
    available_for_start: list[QuestCondition] = Field(
        default_factory=list, alias="AvailableForStart"
    )
    fail: list[QuestCondition] = Field(default_factory=list, alias="Fail")


class Upd(HostRecord):
    stack_objects_count: Optional[float] = Field(None, alias="StackObjectsCount")


class RewardItem(HostRecord):
    id: str = Field(..., alias="_id")
    template: str = Field(..., alias="_tpl")
    upd: Optional[Upd] = None


class Reward(HostRecord):
    """퀘스트 보상 항목"""

    id: str
    type: str = ""
    value: Optional[float] = None
    target: Optional[str] = None
    items: Optional[list[RewardItem]] = None
    find_in_raid: bool = Field(False, alias="findInRaid")
    game_mode: list[str] = Field(default_factory=list, alias="gameMode")
    available_in_game_editions: list[str] = Field(
        default_factory=list, alias="availableInGameEditions"
    )
    is_encoded: bool = Field(False, alias="isEncoded")
    is_hidden: bool = Field(False, alias="isHidden")
    unknown: bool = False

    def first_item_template(self) -> Optional[str]:
        """첫 아이템의 템플릿 ID. 아이템 없으면 None."""
        if not self.items:
            return None
        return self.items[0].template


class Quest(HostRecord):
    id: str = Field(..., alias="_id")
    quest_name: str = Field("", alias="QuestName")
    trader_id: str = Field("", alias="traderId")
    conditions: QuestConditions = Field(default_factory=QuestConditions)
    rewards: dict[str, list[Reward]] = Field(default_factory=dict)


# === Traders ===


class LoyaltyLevel(HostRecord):
    min_level: int = Field(0, alias="minLevel")
    min_sales_sum: float = Field(0, alias="minSalesSum")
    min_standing: float = Field(0.0, alias="minStanding")


class TraderBase(HostRecord):
    id: str = Field(..., alias="_id")
    nickname: str = ""
    loyalty_levels: list[LoyaltyLevel] = Field(
        default_factory=list, alias="loyaltyLevels"
    )


class Trader(HostRecord):
    base: TraderBase
