from abc import ABC, abstractmethod
from typing import Optional, Tuple
from vsphere_images.models import Architecture, GuestOsEntry, GuestOsMatch

class IGuestOsRepository(ABC):
    @abstractmethod
    def list_entries(self) -> Tuple[GuestOsEntry, ...]:
        """카탈로그의 모든 게스트 OS 항목을 카탈로그 순서대로 반환합니다."""
        pass

    @abstractmethod
    def match(self, identifier: Optional[str]) -> GuestOsMatch:
        """식별자와 정확히 일치하는 항목을 찾습니다. 없으면 unmatched 결과를 반환합니다."""
        pass

    @abstractmethod
    def architecture_of(self, display_name: str) -> Optional[Architecture]:
        """표시 이름으로 아키텍처를 조회합니다."""
        pass

    @abstractmethod
    def contains(self, identifier: str) -> bool:
        """식별자가 카탈로그에 있는지 (대소문자 구분, 완전 일치) 확인합니다."""
        pass
