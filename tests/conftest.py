"""Shared test fixtures: a small on-disk host database."""

import json
from pathlib import Path

import pytest

from ref_friendly_quests.core.constants import (
    BaseClasses,
    ItemTpl,
    RefQuests,
    Traders,
)
from ref_friendly_quests.core.quest.overrides import (
    OVERRIDE_DOCUMENT_ADAPTER,
    OverrideDocument,
)
from ref_friendly_quests.db.database import DatabaseService
from ref_friendly_quests.services.mod_helper import PACKAGE_DATA_DIR

ROOT_NODE = "54009119af1c881c07000029"

# 카테고리별 무기 하나씩
WEAPONS = {
    "wpn_carbine": BaseClasses.ASSAULT_CARBINE,
    "wpn_rifle": BaseClasses.ASSAULT_RIFLE,
    "wpn_lmg": BaseClasses.MACHINE_GUN,
    "wpn_dmr": BaseClasses.MARKSMAN_RIFLE,
    "wpn_shotgun": BaseClasses.SHOTGUN,
    "wpn_smg": BaseClasses.SMG,
}

GP_COIN_STACK = 5


def make_item(item_id: str, parent: str, item_type: str = "Item") -> dict:
    return {"_id": item_id, "_name": item_id, "_parent": parent, "_type": item_type}


def build_items() -> dict[str, dict]:
    items = {ROOT_NODE: make_item(ROOT_NODE, "", "Node")}
    items[BaseClasses.WEAPON] = make_item(BaseClasses.WEAPON, ROOT_NODE, "Node")
    for base_class in WEAPONS.values():
        items[base_class] = make_item(base_class, BaseClasses.WEAPON, "Node")
    for item_id, base_class in WEAPONS.items():
        items[item_id] = make_item(item_id, base_class)
    items[ItemTpl.BARTER_LEGA_MEDAL] = make_item(ItemTpl.BARTER_LEGA_MEDAL, ROOT_NODE)
    return items


def make_gp_reward(reward_id: str, stack: float) -> dict:
    return {
        "id": reward_id,
        "type": "Item",
        "value": stack,
        "target": f"{reward_id}_item",
        "items": [
            {
                "_id": f"{reward_id}_item",
                "_tpl": ItemTpl.MONEY_GP_COIN,
                "upd": {"StackObjectsCount": stack},
            }
        ],
    }


def build_quests() -> dict[str, dict]:
    quests = {}
    for index, quest_id in enumerate(RefQuests.ALL):
        quests[quest_id] = {
            "_id": quest_id,
            "QuestName": f"ref_quest_{index}",
            "traderId": Traders.REF,
            "conditions": {
                "AvailableForFinish": [
                    {"id": f"{quest_id}_arena", "conditionType": "CounterCreator"}
                ],
                "AvailableForStart": [],
                "Fail": [],
            },
            "rewards": {
                "Success": [
                    {"id": f"{quest_id}_xp", "type": "Experience", "value": 1000},
                    make_gp_reward(f"{quest_id}_gp", GP_COIN_STACK),
                ],
                "Started": [],
            },
        }
    return quests


def build_ref_trader() -> dict:
    return {
        "_id": Traders.REF,
        "nickname": "Ref",
        "loyaltyLevels": [
            {"minLevel": 1, "minSalesSum": 0, "minStanding": 0.0},
            {"minLevel": 15, "minSalesSum": 0, "minStanding": 0.2},
            {"minLevel": 25, "minSalesSum": 0, "minStanding": 0.35},
            {"minLevel": 35, "minSalesSum": 0, "minStanding": 1.5},
        ],
    }


def write_json(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture()
def database_dir(tmp_path: Path) -> Path:
    """tmp_path 아래에 호스트 DB 디렉터리 생성"""
    root = tmp_path / "database"
    write_json(root / "templates" / "items.json", build_items())
    write_json(root / "templates" / "quests.json", build_quests())
    write_json(root / "traders" / Traders.REF / "base.json", build_ref_trader())
    write_json(root / "locales" / "global" / "en.json", {"greeting": "Hello"})
    write_json(root / "locales" / "global" / "ru.json", {"greeting": "Privet"})
    return root


@pytest.fixture()
def database(database_dir: Path) -> DatabaseService:
    db = DatabaseService()
    db.load_from_directory(database_dir)
    return db


@pytest.fixture()
def override_document() -> OverrideDocument:
    """패키지에 포함된 db/quests.json (매번 새로 로드)"""
    raw = json.loads((PACKAGE_DATA_DIR / "db" / "quests.json").read_text("utf-8"))
    return OVERRIDE_DOCUMENT_ADAPTER.validate_python(raw)
