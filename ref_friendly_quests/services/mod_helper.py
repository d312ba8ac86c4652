"""모드 폴더 접근 헬퍼 — 경로 해석 + JSON 로드/검증"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import TypeAdapter

from ref_friendly_quests.core.logging import get_logger

logger = get_logger(__name__)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ModHelper:
    def __init__(self, mod_path: Optional[str | Path] = None) -> None:
        self._mod_path = Path(mod_path) if mod_path else PACKAGE_DATA_DIR

    def get_absolute_path_to_mod_folder(self) -> Path:
        return self._mod_path.resolve()

    def get_json_data_from_file(
        self, folder: str | Path, filename: str, model_type: Any
    ) -> Any:
        """folder/filename JSON을 읽어 model_type으로 검증 후 반환.

        파일 없음 → FileNotFoundError, 스키마 위반 → pydantic.ValidationError.
        """
        path = Path(folder) / filename
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        data = TypeAdapter(model_type).validate_python(raw)
        logger.info("Loaded %s", path)
        return data
