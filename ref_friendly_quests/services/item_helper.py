"""아이템 분류 헬퍼 — _parent 체인 기반 base class 판정"""

from __future__ import annotations

from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.db.database import DatabaseService

logger = get_logger(__name__)


class ItemHelper:
    """아이템 템플릿이 특정 분류 노드의 하위인지 판정.

    Node 레코드 자체는 어떤 분류에도 속하지 않는 것으로 본다.
    조상 목록은 템플릿별로 캐시한다.
    """

    def __init__(self, database: DatabaseService) -> None:
        self._db = database
        self._ancestor_cache: dict[str, frozenset[str]] = {}

    def get_ancestors(self, item_id: str) -> frozenset[str]:
        """부모 → 루트까지의 노드 ID 집합. 미등록 아이템이면 빈 집합."""
        cached = self._ancestor_cache.get(item_id)
        if cached is not None:
            return cached

        items = self._db.get_items()
        ancestors: list[str] = []
        seen = {item_id}
        current = items.get(item_id)
        while current is not None and current.parent:
            parent_id = current.parent
            if parent_id in seen:
                logger.warning("Cycle in item hierarchy at %s", parent_id)
                break
            seen.add(parent_id)
            ancestors.append(parent_id)
            current = items.get(parent_id)

        result = frozenset(ancestors)
        self._ancestor_cache[item_id] = result
        return result

    def is_item(self, item_id: str) -> bool:
        item = self._db.get_items().get(item_id)
        return item is not None and item.type == "Item"

    def is_of_base_class(self, item_id: str, base_class: str) -> bool:
        if not self.is_item(item_id):
            return False
        return base_class in self.get_ancestors(item_id)

    def clear_cache(self) -> None:
        self._ancestor_cache.clear()
