"""DatabaseImporter — 호스트 데이터베이스 로드 단계

OnLoadOrder.DATABASE. 모든 모드의 POST_DB 단계보다 먼저 실행된다.
"""

from pathlib import Path

from ref_friendly_quests.db.database import DatabaseService
from ref_friendly_quests.modules.base import OnLoad, OnLoadOrder


class DatabaseImporter(OnLoad):
    def __init__(self, database: DatabaseService, database_path: str | Path) -> None:
        self._db = database
        self._path = Path(database_path)

    @property
    def name(self) -> str:
        return "database_importer"

    @property
    def type_priority(self) -> int:
        return OnLoadOrder.DATABASE

    def on_load(self) -> None:
        self._db.load_from_directory(self._path)
