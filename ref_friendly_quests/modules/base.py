"""로드 순서 컴포넌트 기반 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional


class OnLoadOrder(IntEnum):
    """호스트 로드 단계. 값이 작을수록 먼저 실행."""

    PRE_MOD_LOADER = 0
    DATABASE = 100_000
    POST_DB_MOD_LOADER = 200_000
    POST_MOD_LOADER = 300_000


@dataclass
class ModMetadata:
    """모드 식별 정보

    mod_guid는 역도메인 표기 권장 (예: "com.author.modname").
    """

    mod_guid: str
    name: str
    author: str
    version: str
    host_version: str  # 호환 호스트 버전 범위 (예: "~4.0.10")
    license: Optional[str] = None
    url: Optional[str] = None
    contributors: List[str] = field(default_factory=list)
    incompatibilities: List[str] = field(default_factory=list)  # mod_guid 목록
    mod_dependencies: Dict[str, str] = field(default_factory=dict)  # mod_guid → 버전 범위


class OnLoad(ABC):
    """호스트 시작 시 한 번 호출되는 컴포넌트

    규칙:
    - type_priority 오름차순 실행
    - 같은 priority는 등록 순서
    - on_load는 동기 실행, 예외는 그대로 전파 (로드 실패)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """컴포넌트 고유 이름"""
        ...

    @property
    def type_priority(self) -> int:
        return OnLoadOrder.POST_DB_MOD_LOADER

    @property
    def metadata(self) -> Optional[ModMetadata]:
        """모드 컴포넌트면 메타데이터, 호스트 내장 컴포넌트면 None"""
        return None

    @abstractmethod
    def on_load(self) -> None:
        ...
