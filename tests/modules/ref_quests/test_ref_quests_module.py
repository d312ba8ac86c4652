"""RefFriendlyQuests 통합 테스트 — DB 로드 → 모드 on_load 전체 흐름"""

import json
import shutil
from pathlib import Path

import pytest

from ref_friendly_quests.config import Settings
from ref_friendly_quests.core.constants import ItemTpl, RefQuests, RewardOutcome, Traders
from ref_friendly_quests.core.quest.enums import WeaponCategory
from ref_friendly_quests.core.quest.overrides import finish_condition, weapon_condition
from ref_friendly_quests.main import build_loader
from ref_friendly_quests.modules.base import OnLoadOrder
from ref_friendly_quests.modules.ref_quests.module import METADATA, RefFriendlyQuests
from ref_friendly_quests.services.mod_helper import PACKAGE_DATA_DIR

EXPECTED_SLOTS = {
    WeaponCategory.CARBINE: ["wpn_carbine"],
    WeaponCategory.RIFLE: ["wpn_rifle"],
    WeaponCategory.MACHINE_GUN: ["wpn_lmg"],
    WeaponCategory.MARKSMAN_RIFLE: ["wpn_dmr"],
    WeaponCategory.SHOTGUN: ["wpn_shotgun"],
    WeaponCategory.SMG: ["wpn_smg"],
}


def _make_mod_dir(tmp_path: Path, **config) -> Path:
    mod_dir = tmp_path / "mod"
    shutil.copytree(PACKAGE_DATA_DIR, mod_dir)
    values = {
        "changeLoyalty4RepRequirements": True,
        "addLegaMedalRewards": True,
        "gpCoinMultiplier": 2.0,
    }
    values.update(config)
    (mod_dir / "config.json").write_text(json.dumps(values), encoding="utf-8")
    return mod_dir


def _run(database_dir: Path, mod_dir: Path):
    settings = Settings(
        _env_file=None, DATABASE_PATH=str(database_dir), MOD_PATH=str(mod_dir)
    )
    loader, database = build_loader(settings)
    loader.load()
    mod = next(c for c in loader.components if isinstance(c, RefFriendlyQuests))
    return loader, database, mod


def _count_lega(rewards) -> int:
    return sum(1 for r in rewards if r.first_item_template() == ItemTpl.BARTER_LEGA_MEDAL)


class TestRefFriendlyQuestsComponent:
    def test_priority_and_metadata(self, database):
        mod = RefFriendlyQuests(database, None, None)
        assert mod.type_priority == OnLoadOrder.POST_DB_MOD_LOADER + 69420
        assert mod.metadata is METADATA
        assert mod.metadata.mod_guid == "com.acidphantasm.reffriendlyquests"

    def test_runs_after_database_stage(self, database_dir, tmp_path):
        loader, _, _ = _run(database_dir, _make_mod_dir(tmp_path))
        assert [c.name for c in loader.execution_order()] == [
            "database_importer",
            "ref_friendly_quests",
        ]


class TestFullLoad:
    @pytest.fixture()
    def loaded(self, database_dir, tmp_path):
        return _run(database_dir, _make_mod_dir(tmp_path))

    def test_weapon_slots_filled(self, loaded):
        _, _, mod = loaded
        for category, ids in EXPECTED_SLOTS.items():
            condition = weapon_condition(mod.override_document, category)
            assert condition.counter.conditions[0].weapon == ids

    def test_finish_conditions_replaced(self, loaded):
        _, database, mod = loaded
        quests = database.get_quests()
        for quest_id in RefQuests.TO_EDIT:
            ids = [c.id for c in quests[quest_id].conditions.available_for_finish]
            assert f"{quest_id}_arena" not in ids
            assert ids == [
                c.id for c in mod.override_document[quest_id].available_for_finish
            ]

    def test_unedited_quest_keeps_conditions(self, loaded):
        _, database, _ = loaded
        quest = database.get_quests()[RefQuests.DECISIONS]
        assert [c.id for c in quest.conditions.available_for_finish] == [
            f"{RefQuests.DECISIONS}_arena"
        ]

    def test_edited_quest_sees_weapon_lists(self, loaded):
        _, database, _ = loaded
        quest = database.get_quests()[RefQuests.AGAINST_THE_CONSCIENCE_P2]
        smg = quest.conditions.available_for_finish[WeaponCategory.SMG.slot]
        assert smg.counter.conditions[0].weapon == ["wpn_smg"]

    def test_locales_patched_on_resolution(self, loaded):
        _, database, mod = loaded
        tables = database.get_locales().global_
        assert all(t.transformer_count == 1 for t in tables.values())

        en = tables["en"].value
        p1 = finish_condition(mod.override_document, RefQuests.TO_GREAT_HEIGHTS_P1).id
        shotgun = weapon_condition(mod.override_document, WeaponCategory.SHOTGUN).id
        assert en[p1] == "Eliminate 10 PMCs"
        assert en[shotgun] == "Eliminate any 50 targets with Shotguns"
        assert en["greeting"] == "Hello"
        assert tables["ru"].value[p1] == "Eliminate 10 PMCs"

    def test_loyalty_changed(self, loaded):
        _, database, _ = loaded
        levels = database.get_trader(Traders.REF).base.loyalty_levels
        assert levels[3].min_standing == 1.0

    def test_lega_medal_added_once(self, loaded):
        _, database, mod = loaded
        quests = database.get_quests()
        for quest_id in RefQuests.ALL:
            assert _count_lega(quests[quest_id].rewards[RewardOutcome.SUCCESS]) == 1

        mod.add_lega_medal_rewards()
        for quest_id in RefQuests.ALL:
            assert _count_lega(quests[quest_id].rewards[RewardOutcome.SUCCESS]) == 1

    def test_gp_coin_rescaled_without_compounding(self, loaded):
        _, database, mod = loaded
        rewards = database.get_quests()[RefQuests.SURPRISE].rewards[RewardOutcome.SUCCESS]
        gp = rewards[1]
        assert gp.items[0].upd.stack_objects_count == 10
        assert gp.value == 10

        mod.multiply_gp_coin()
        assert gp.items[0].upd.stack_objects_count == 10


class TestToggles:
    def test_disabled_toggles(self, database_dir, tmp_path):
        mod_dir = _make_mod_dir(
            tmp_path,
            changeLoyalty4RepRequirements=False,
            addLegaMedalRewards=False,
            gpCoinMultiplier=1.0,
        )
        _, database, _ = _run(database_dir, mod_dir)

        assert database.get_trader(Traders.REF).base.loyalty_levels[3].min_standing == 1.5
        quests = database.get_quests()
        for quest_id in RefQuests.ALL:
            success = quests[quest_id].rewards[RewardOutcome.SUCCESS]
            assert _count_lega(success) == 0
            assert success[1].items[0].upd.stack_objects_count == 5


class TestFailures:
    def test_missing_quest_in_host_table(self, database_dir, tmp_path):
        quests_path = database_dir / "templates" / "quests.json"
        quests = json.loads(quests_path.read_text(encoding="utf-8"))
        del quests[RefQuests.TO_GREAT_HEIGHTS_P4]
        quests_path.write_text(json.dumps(quests), encoding="utf-8")

        with pytest.raises(KeyError):
            _run(database_dir, _make_mod_dir(tmp_path))

    def test_malformed_override_document(self, database_dir, tmp_path):
        mod_dir = _make_mod_dir(tmp_path)
        doc_path = mod_dir / "db" / "quests.json"
        doc = json.loads(doc_path.read_text(encoding="utf-8"))
        doc[RefQuests.AGAINST_THE_CONSCIENCE_P2]["AvailableForFinish"] = doc[
            RefQuests.AGAINST_THE_CONSCIENCE_P2
        ]["AvailableForFinish"][:3]
        doc_path.write_text(json.dumps(doc), encoding="utf-8")

        with pytest.raises(IndexError):
            _run(database_dir, mod_dir)

    def test_missing_ref_trader(self, database_dir, tmp_path):
        shutil.rmtree(database_dir / "traders")
        with pytest.raises(KeyError):
            _run(database_dir, _make_mod_dir(tmp_path))
