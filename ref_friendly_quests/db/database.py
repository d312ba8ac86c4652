"""In-memory host database tables loaded from a JSON database directory.

Directory layout::

    templates/items.json            {item_id: item}
    templates/quests.json           {quest_id: quest}
    locales/global/<code>.json      {key: text}   (read lazily)
    traders/<trader_id>/base.json   trader base
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.db.lazy_load import LazyLoad
from ref_friendly_quests.db.models import ItemTemplate, Quest, Trader, TraderBase

logger = get_logger(__name__)

LocaleTable = LazyLoad[dict[str, str]]


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class Locales:
    """로케일 테이블 묶음. global_: 로케일 코드 → 지연 로딩 문자열 사전"""

    global_: dict[str, LocaleTable] = field(default_factory=dict)


class DatabaseService:
    """Host-owned tables.

    Callers receive the live collections and may mutate their contents;
    the tables themselves are never rebound after loading.
    """

    def __init__(self) -> None:
        self._items: dict[str, ItemTemplate] = {}
        self._quests: dict[str, Quest] = {}
        self._traders: dict[str, Trader] = {}
        self._locales = Locales()
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_items(self) -> dict[str, ItemTemplate]:
        return self._items

    def get_quests(self) -> dict[str, Quest]:
        return self._quests

    def get_locales(self) -> Locales:
        return self._locales

    def get_traders(self) -> dict[str, Trader]:
        return self._traders

    def get_trader(self, trader_id: str) -> Trader:
        """트레이더 조회. 없으면 KeyError."""
        return self._traders[trader_id]

    # === 로드 ===

    def load_from_directory(self, path: str | Path) -> None:
        """Populate every table from a database directory."""
        root = Path(path)

        raw_items: dict[str, dict] = _read_json(root / "templates" / "items.json")
        for item_id, raw in raw_items.items():
            self._items[item_id] = ItemTemplate.model_validate(raw)

        raw_quests: dict[str, dict] = _read_json(root / "templates" / "quests.json")
        for quest_id, raw in raw_quests.items():
            self._quests[quest_id] = Quest.model_validate(raw)

        traders_dir = root / "traders"
        if traders_dir.is_dir():
            for base_path in sorted(traders_dir.glob("*/base.json")):
                trader = Trader(base=TraderBase.model_validate(_read_json(base_path)))
                self._traders[trader.base.id] = trader

        locale_dir = root / "locales" / "global"
        if locale_dir.is_dir():
            for locale_path in sorted(locale_dir.glob("*.json")):
                self.add_locale(locale_path.stem, self._locale_loader(locale_path))

        self._loaded = True
        logger.info(
            "Loaded database from %s (items=%d, quests=%d, traders=%d, locales=%d)",
            root,
            len(self._items),
            len(self._quests),
            len(self._traders),
            len(self._locales.global_),
        )

    def add_locale(self, code: str, loader) -> LocaleTable:
        """로케일 테이블 등록. loader는 첫 접근 시 호출된다."""
        table: LocaleTable = LazyLoad(loader)
        self._locales.global_[code] = table
        return table

    @staticmethod
    def _locale_loader(path: Path):
        def load() -> Optional[dict[str, str]]:
            logger.debug("Reading locale file: %s", path)
            return _read_json(path)

        return load
