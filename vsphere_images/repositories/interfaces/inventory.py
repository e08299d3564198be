from abc import ABC, abstractmethod
from typing import Any, List, Optional
from vsphere_images.models import RuntimeInfo, TemplateConfig

class IInventoryRepository(ABC):
    @abstractmethod
    def search_virtual_machines(self) -> List[Any]:
        """루트 VM 폴더 아래의 모든 VirtualMachine 엔티티를 검색합니다."""
        pass

    @abstractmethod
    def read_config(self, entity: Any) -> TemplateConfig:
        """엔티티의 설정 스냅샷을 읽습니다. 읽을 수 없으면 TransientMappingError."""
        pass

    @abstractmethod
    def read_runtime(self, entity: Any) -> Optional[RuntimeInfo]:
        """엔티티의 런타임 스냅샷(전원 상태)을 읽습니다."""
        pass

    @abstractmethod
    def find_virtual_machine(self, vm_id: str) -> Optional[Any]:
        """UUID로 VM 엔티티를 조회합니다."""
        pass

    @abstractmethod
    def clone(self, entity: Any, name: str, as_template: bool = True) -> Any:
        """VM을 복제하고 복제된 엔티티를 반환합니다."""
        pass

    @abstractmethod
    def destroy(self, entity: Any) -> None:
        """엔티티를 하이퍼바이저에서 삭제합니다."""
        pass
