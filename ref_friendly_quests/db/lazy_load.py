"""지연 로딩 값 + 변환기 파이프라인"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

from ref_friendly_quests.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Transformer = Callable[[Optional[T]], Optional[T]]


class LazyLoad(Generic[T]):
    """첫 접근 시 loader를 호출하고, 등록된 변환기를 순서대로 적용한 뒤 캐시.

    사용 패턴:
        table = LazyLoad(lambda: json.loads(path.read_text()))
        table.add_transformer(patch_strings)
        table.value  # 여기서 로드 + 변환
    """

    def __init__(self, loader: Callable[[], Optional[T]]) -> None:
        self._loader = loader
        self._transformers: list[Transformer] = []
        self._value: Optional[T] = None
        self._resolved = False

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    @property
    def transformer_count(self) -> int:
        return len(self._transformers)

    def add_transformer(self, transformer: Transformer) -> None:
        """변환기 등록. 이미 해석된 값이면 즉시 적용한다."""
        self._transformers.append(transformer)
        if self._resolved:
            self._value = transformer(self._value)

    @property
    def value(self) -> Optional[T]:
        if not self._resolved:
            data = self._loader()
            for transformer in self._transformers:
                data = transformer(data)
            self._value = data
            self._resolved = True
            logger.debug(
                "LazyLoad resolved (%d transformers applied)", len(self._transformers)
            )
        return self._value
