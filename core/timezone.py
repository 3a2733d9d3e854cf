'''시간대 유틸리티(KR). Timezone utilities (EN).'''

from __future__ import annotations

from datetime import datetime


def local_now() -> str:
    '''로컬 기준 현재 시각을 ISO8601로 반환 · Return local now as ISO8601.'''

    return datetime.now().astimezone().isoformat(timespec='seconds')


__all__ = ['local_now']
