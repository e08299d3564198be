from typing import Iterable, Optional, Tuple
from vsphere_images.models import Architecture, GuestOsEntry, GuestOsMatch
from vsphere_images.repositories.interfaces import IGuestOsRepository

class InMemoryGuestOsRepository(IGuestOsRepository):
    """
    불변 게스트 OS 테이블을 감싸는 카탈로그 구현입니다.
    생성 시점에 전달된 항목으로 고정되며 프로세스가 끝날 때까지 바뀌지 않습니다.
    """
    def __init__(self, entries: Iterable[GuestOsEntry]):
        self._entries: Tuple[GuestOsEntry, ...] = tuple(entries)
        self._by_identifier = {entry.identifier: entry for entry in self._entries}
        self._by_display_name = {entry.display_name: entry.architecture for entry in self._entries}

    def list_entries(self) -> Tuple[GuestOsEntry, ...]:
        return self._entries

    def match(self, identifier: Optional[str]) -> GuestOsMatch:
        entry = self._by_identifier.get(identifier) if identifier is not None else None
        return GuestOsMatch(raw_identifier=identifier, entry=entry)

    def architecture_of(self, display_name: str) -> Optional[Architecture]:
        return self._by_display_name.get(display_name)

    def contains(self, identifier: str) -> bool:
        return identifier in self._by_identifier
