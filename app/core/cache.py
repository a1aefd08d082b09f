# MISE-DASHBOARD/app/core/cache.py

import time
from typing import Any, Callable, Optional


class TTLCache:
    """
    프로세스 단위 응답 캐시 (key -> (value, 저장시각))
    - 저장 후 ttl 초가 지나기 전까지만 유효
    - 만료된 항목은 덮어쓰기 전까지 남아있지만 get()에서는 없는 것과 동일하게 취급
    - 용량 제한/주기적 정리 없음 (키는 시도명, 격자좌표 정도로 한정됨)
    """

    def __init__(self, ttl_seconds: float = 600.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self._clock = clock
        self._store: dict[str, tuple[Any, float]] = {}

    def get(self, key: str) -> Optional[Any]:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at < self.ttl:
            return value
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (value, self._clock())

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
