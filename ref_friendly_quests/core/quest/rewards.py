"""퀘스트 보상 패치 — 보너스 아이템 추가, 화폐 스택 배율"""

from __future__ import annotations

from typing import Iterable, Optional

from ref_friendly_quests.core.constants import (
    ItemTpl,
    RefQuests,
    RewardOutcome,
    RewardType,
)
from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.db.models import Quest, Reward, RewardItem, Upd

logger = get_logger(__name__)

LEGA_MEDAL_REWARD_ID = "68341d7d7559f4e6d50bc0e7"
LEGA_MEDAL_ITEM_ID = "68a9695194f6582e59140ee9"


def make_lega_medal_reward() -> Reward:
    """고정 보너스 보상. 호출마다 새 객체."""
    return Reward(
        id=LEGA_MEDAL_REWARD_ID,
        type=RewardType.ITEM,
        value=1,
        target=LEGA_MEDAL_ITEM_ID,
        items=[
            RewardItem(
                id=LEGA_MEDAL_ITEM_ID,
                template=ItemTpl.BARTER_LEGA_MEDAL,
                upd=Upd(stack_objects_count=1),
            )
        ],
        find_in_raid=False,
        game_mode=["regular", "pve"],
        available_in_game_editions=[],
        is_encoded=False,
        is_hidden=False,
        unknown=False,
    )


def find_reward_index(rewards: list[Reward], template: str) -> int:
    """첫 아이템이 template인 첫 보상의 인덱스. 없으면 -1."""
    for index, reward in enumerate(rewards):
        if reward.first_item_template() == template:
            return index
    return -1


def add_bonus_reward(rewards: list[Reward]) -> bool:
    """Lega Medal 보상이 없으면 추가. 반환: 추가 여부 (멱등)."""
    if find_reward_index(rewards, ItemTpl.BARTER_LEGA_MEDAL) != -1:
        return False
    rewards.append(make_lega_medal_reward())
    return True


def add_bonus_rewards(
    quests: dict[str, Quest], quest_ids: Iterable[str] = RefQuests.ALL
) -> int:
    """대상 퀘스트의 Success 보상에 보너스 추가. 반환: 추가된 수."""
    added = 0
    for quest_id in quest_ids:
        success = quests[quest_id].rewards[RewardOutcome.SUCCESS]
        if add_bonus_reward(success):
            added += 1
        else:
            logger.debug("Bonus reward already present: %s", quest_id)
    logger.info("Added bonus rewards to %d quests", added)
    return added


class CurrencyRescaler:
    """화폐 보상 스택 배율 적용.

    최초 관측한 스택 수를 보상 ID별 기준값으로 기억하고,
    항상 기준값 × 배율로 계산한다. 반복 실행해도 누적되지 않음.
    """

    def __init__(self, template: str = ItemTpl.MONEY_GP_COIN) -> None:
        self._template = template
        self._baselines: dict[str, float] = {}

    def baseline(self, reward_id: str) -> Optional[float]:
        return self._baselines.get(reward_id)

    def rescale(self, rewards: list[Reward], multiplier: float) -> Optional[float]:
        """첫 화폐 보상의 스택과 value를 갱신. 반환: 새 스택 수 (대상 없으면 None)."""
        index = find_reward_index(rewards, self._template)
        if index == -1:
            return None

        reward = rewards[index]
        item = reward.items[0]
        if reward.id not in self._baselines:
            current = item.upd.stack_objects_count if item.upd else None
            if current is None:
                raise ValueError(f"Currency reward has no stack count: {reward.id}")
            self._baselines[reward.id] = current

        new_stack = round(self._baselines[reward.id] * multiplier)
        item.upd = Upd(stack_objects_count=new_stack)
        reward.value = new_stack
        return new_stack

    def rescale_quests(
        self,
        quests: dict[str, Quest],
        multiplier: float,
        quest_ids: Iterable[str] = RefQuests.ALL,
    ) -> int:
        """대상 퀘스트의 Success 보상에 배율 적용. 반환: 갱신된 보상 수."""
        updated = 0
        for quest_id in quest_ids:
            new_stack = self.rescale(
                quests[quest_id].rewards[RewardOutcome.SUCCESS], multiplier
            )
            if new_stack is not None:
                updated += 1
                logger.debug("Rescaled currency reward: %s -> %s", quest_id, new_stack)
        logger.info("Rescaled currency rewards on %d quests (x%s)", updated, multiplier)
        return updated
