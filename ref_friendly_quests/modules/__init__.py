"""로드 순서 컴포넌트 시스템"""

from ref_friendly_quests.modules.base import ModMetadata, OnLoad, OnLoadOrder
from ref_friendly_quests.modules.mod_loader import ModLoader

__all__ = ["ModMetadata", "OnLoad", "OnLoadOrder", "ModLoader"]
