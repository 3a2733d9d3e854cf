"""숨김/시스템 항목 판별./Hidden and system entry classification."""

from __future__ import annotations

import os
import stat
from typing import NamedTuple

from .models import InclusionPolicy

_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_SYSTEM = getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0x4)


class EntryAttributes(NamedTuple):
    """항목 속성 플래그./Attribute flags of a directory entry."""

    hidden: bool = False
    system: bool = False


def read_attributes(entry: os.DirEntry[str]) -> EntryAttributes:
    """DirEntry에서 속성을 읽습니다./Read hidden/system flags from a DirEntry.

    Windows exposes ``st_file_attributes``; elsewhere a leading dot marks a
    hidden entry and nothing is ever "system". A failed lookup is treated as a
    plain entry so that its size is not lost.
    """

    try:
        result = entry.stat(follow_symlinks=False)
    except OSError:
        return EntryAttributes()
    flags = getattr(result, "st_file_attributes", None)
    if flags is None:
        return EntryAttributes(hidden=entry.name.startswith("."))
    return EntryAttributes(hidden=bool(flags & _HIDDEN), system=bool(flags & _SYSTEM))


def is_included(attributes: EntryAttributes, policy: InclusionPolicy) -> bool:
    """포함 여부를 결정합니다./Return True when the entry counts toward totals."""

    if policy.include_system_and_hidden:
        return True
    return not (attributes.hidden or attributes.system)


def extension_of(name: str) -> str:
    """확장자(점 포함, 대소문자 유지)./Extension with leading dot, case kept.

    Everything from the last dot, a leading dot included; a trailing dot
    yields no extension.
    """

    index = name.rfind(".")
    if index < 0 or index == len(name) - 1:
        return ""
    return name[index:]
