"""RefFriendlyQuests — OnLoad 컴포넌트

호스트 DB 로드 이후 (POST_DB_MOD_LOADER + 69420) 한 번 실행.
Ref 퀘스트의 Arena 전용 완료 조건을 일반 레이드 조건으로 교체하고
표시 문자열, 로열티 요구치, 보상을 조정한다.
"""

import logging
from typing import Optional

from ref_friendly_quests.config import ModConfig
from ref_friendly_quests.core.constants import Traders
from ref_friendly_quests.core.loyalty import set_min_standing
from ref_friendly_quests.core.quest.classifier import classify_weapons
from ref_friendly_quests.core.quest.locales import (
    build_locale_overrides,
    make_locale_transformer,
)
from ref_friendly_quests.core.quest.overrides import (
    OverrideDocument,
    replace_finish_conditions,
    validate_override_document,
)
from ref_friendly_quests.core.quest.rewards import CurrencyRescaler, add_bonus_rewards
from ref_friendly_quests.db.database import DatabaseService
from ref_friendly_quests.modules.base import ModMetadata, OnLoad, OnLoadOrder
from ref_friendly_quests.services.item_helper import ItemHelper
from ref_friendly_quests.services.mod_helper import ModHelper

logger = logging.getLogger(__name__)

METADATA = ModMetadata(
    mod_guid="com.acidphantasm.reffriendlyquests",
    name="Ref Friendly Quests",
    author="acidphantasm",
    version="2.0.3",
    host_version="~4.0.10",
    license="MIT",
)

CONFIG_FILE = "config.json"
OVERRIDE_FILE = "db/quests.json"


class RefFriendlyQuests(OnLoad):
    """Ref 퀘스트 패치 모드

    순서:
    1. config.json, db/quests.json 로드 + 구조 검증
    2. 무기 분류 → 무기 슬롯 채우기
    3. 완료 조건 교체
    4. 로케일 변환기 등록
    5. (옵션) 로열티 LL4 요구치
    6. (옵션) 보너스 보상
    7. GP 코인 배율
    """

    def __init__(
        self,
        database: DatabaseService,
        mod_helper: ModHelper,
        item_helper: ItemHelper,
    ) -> None:
        self._db = database
        self._mod_helper = mod_helper
        self._item_helper = item_helper
        self._rescaler = CurrencyRescaler()
        self.mod_config: Optional[ModConfig] = None
        self.override_document: Optional[OverrideDocument] = None

    @property
    def name(self) -> str:
        return "ref_friendly_quests"

    @property
    def type_priority(self) -> int:
        return OnLoadOrder.POST_DB_MOD_LOADER + 69420

    @property
    def metadata(self) -> ModMetadata:
        return METADATA

    def on_load(self) -> None:
        mod_path = self._mod_helper.get_absolute_path_to_mod_folder()
        self.mod_config = self._mod_helper.get_json_data_from_file(
            mod_path, CONFIG_FILE, ModConfig
        )
        self.override_document = self._mod_helper.get_json_data_from_file(
            mod_path, OVERRIDE_FILE, OverrideDocument
        )
        validate_override_document(self.override_document)

        self.add_weapons_to_quests()
        self.edit_quests()
        self.fix_locales()
        if self.mod_config.change_loyalty4_rep_requirements:
            self.change_loyalty()
        else:
            logger.debug("Loyalty edit disabled")
        if self.mod_config.add_lega_medal_rewards:
            self.add_lega_medal_rewards()
        else:
            logger.debug("Bonus rewards disabled")
        self.multiply_gp_coin()

        logger.info("%s %s loaded", METADATA.name, METADATA.version)

    def add_weapons_to_quests(self) -> None:
        classify_weapons(
            self._db.get_items().keys(),
            self._item_helper.is_of_base_class,
            self.override_document,
        )

    def edit_quests(self) -> None:
        replace_finish_conditions(self._db.get_quests(), self.override_document)

    def fix_locales(self) -> None:
        transformer = make_locale_transformer(
            build_locale_overrides(self.override_document)
        )
        tables = self._db.get_locales().global_
        for table in tables.values():
            table.add_transformer(transformer)
        logger.info("Registered locale transformer on %d locales", len(tables))

    def change_loyalty(self) -> None:
        set_min_standing(self._db.get_trader(Traders.REF))

    def add_lega_medal_rewards(self) -> None:
        add_bonus_rewards(self._db.get_quests())

    def multiply_gp_coin(self) -> None:
        self._rescaler.rescale_quests(
            self._db.get_quests(), self.mod_config.gp_coin_multiplier
        )
