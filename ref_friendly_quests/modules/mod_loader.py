"""모드 로더 - 등록, 의존성/비호환 검증, 우선순위 순 on_load 실행"""

from typing import Dict, List

from ref_friendly_quests.core.logging import get_logger
from ref_friendly_quests.modules.base import ModMetadata, OnLoad

logger = get_logger(__name__)


class ModLoader:
    """OnLoad 컴포넌트 생명주기 관리. load()는 프로세스당 한 번."""

    def __init__(self) -> None:
        self._components: List[OnLoad] = []
        self._mods: Dict[str, ModMetadata] = {}
        self._loaded = False

    @property
    def components(self) -> List[OnLoad]:
        """등록 순서 그대로 (읽기 전용 사본)"""
        return list(self._components)

    @property
    def mods(self) -> Dict[str, ModMetadata]:
        return dict(self._mods)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def register(self, component: OnLoad) -> None:
        """컴포넌트 등록. 같은 이름 또는 같은 mod_guid 중복 시 ValueError."""
        if self._loaded:
            raise RuntimeError(f"Cannot register after load: {component.name}")
        if any(c.name == component.name for c in self._components):
            raise ValueError(f"Component already registered: {component.name}")

        meta = component.metadata
        if meta is not None:
            if meta.mod_guid in self._mods:
                raise ValueError(f"Mod already registered: {meta.mod_guid}")
            self._mods[meta.mod_guid] = meta
            logger.info(f"모드 등록: {meta.name} {meta.version} ({meta.mod_guid})")

        self._components.append(component)
        logger.info(f"컴포넌트 등록: {component.name} (priority={component.type_priority})")

    def validate(self) -> None:
        """의존성 미등록 / 비호환 모드 동시 등록 시 RuntimeError."""
        for guid, meta in self._mods.items():
            for dep in meta.mod_dependencies:
                if dep not in self._mods:
                    raise RuntimeError(f"의존성 미등록: {guid} requires {dep}")
            for other in meta.incompatibilities:
                if other in self._mods:
                    raise RuntimeError(f"비호환 모드: {guid} conflicts with {other}")

    def execution_order(self) -> List[OnLoad]:
        """priority 오름차순, 동률은 등록 순서 (stable sort)"""
        return sorted(self._components, key=lambda c: c.type_priority)

    def load(self) -> None:
        """모든 컴포넌트의 on_load 순차 호출. 두 번째 호출은 RuntimeError."""
        if self._loaded:
            raise RuntimeError("ModLoader.load() already executed")
        self.validate()
        self._loaded = True

        for component in self.execution_order():
            logger.info(f"on_load 실행: {component.name} (priority={component.type_priority})")
            component.on_load()

        logger.info(f"로드 완료: {len(self._components)} components")
