"""트레이더 로열티 레벨 요구치 수정"""

from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.db.models import Trader

logger = get_logger(__name__)

# loyaltyLevels[3] = LL4
LOYALTY_LEVEL_4_INDEX = 3
LOYALTY_LEVEL_4_MIN_STANDING = 1.0


def set_min_standing(
    trader: Trader,
    level_index: int = LOYALTY_LEVEL_4_INDEX,
    min_standing: float = LOYALTY_LEVEL_4_MIN_STANDING,
) -> None:
    """해당 레벨의 minStanding 설정. 레벨이 없으면 IndexError."""
    level = trader.base.loyalty_levels[level_index]
    previous = level.min_standing
    level.min_standing = min_standing
    logger.info(
        "Trader %s LL%d minStanding: %s -> %s",
        trader.base.nickname or trader.base.id,
        level_index + 1,
        previous,
        min_standing,
    )
