import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from vsphere_images.models import ImageClass, ImageFilterOptions, MachineImage, ResourceStatus
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.services.exceptions import TransientMappingError
from vsphere_images.services.image_mapper import ImageMapper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanOutcome:
    """엔티티 하나를 스캔한 결과. image가 None이면 skip_reason에 이유가 들어갑니다."""
    entity: Any
    image: Optional[MachineImage] = None
    skip_reason: Optional[str] = None

    @property
    def mapped(self) -> bool:
        return self.image is not None


def to_filter(filter_or_class: Union[ImageFilterOptions, ImageClass, None]) -> Optional[ImageFilterOptions]:
    if isinstance(filter_or_class, ImageClass):
        return ImageFilterOptions.for_class(filter_or_class)
    return filter_or_class


class InventoryScanner:
    def __init__(self, inventory: IInventoryRepository, mapper: ImageMapper):
        self.inventory = inventory
        self.mapper = mapper

    def scan(self) -> List[ScanOutcome]:
        """
        VM 인벤토리 전체를 훑어 엔티티별 결과를 만듭니다.

        설정을 읽을 수 없는 엔티티, 템플릿이 아닌 엔티티, 매핑에 실패한 엔티티는
        건너뛴 이유와 함께 기록됩니다. 개별 엔티티의 실패는 스캔을 중단시키지 않습니다.

        Returns:
            검색 결과 순서 그대로의 ScanOutcome 리스트.

        Raises:
            AuthenticationError, RemoteAccessError: 검색 호출 자체가 실패했을 때.
        """
        outcomes = []
        for entity in self.inventory.search_virtual_machines():
            if entity is None:
                continue
            outcomes.append(self._scan_entity(entity))
        return outcomes

    def _scan_entity(self, entity: Any) -> ScanOutcome:
        try:
            config = self.inventory.read_config(entity)
        except TransientMappingError as e:
            logger.warning("Skipping unreadable virtual machine %s: %s", entity, e)
            return ScanOutcome(entity, skip_reason=f"unreadable: {e}")

        if not config.is_template:
            return ScanOutcome(entity, skip_reason="not a template")

        image = self.mapper.to_machine_image(entity, config)
        if image is None:
            logger.warning("Skipping template %s (%s): could not be mapped", config.name, config.uuid)
            return ScanOutcome(entity, skip_reason="unmappable")
        return ScanOutcome(entity, image=image)

    def list_images(self, filter_or_class: Union[ImageFilterOptions, ImageClass, None] = None) -> List[MachineImage]:
        """
        템플릿으로 표시된 엔티티를 MachineImage로 변환해 반환합니다.

        Args:
            filter_or_class: 필터 옵션 또는 이미지 클래스. None이면 모두 반환합니다.

        Returns:
            하이퍼바이저 검색 순서 그대로의 이미지 리스트. 정렬하지 않습니다.
        """
        options = to_filter(filter_or_class)
        return [
            outcome.image
            for outcome in self.scan()
            if outcome.mapped and (options is None or options.matches(outcome.image))
        ]

    def get_image(self, image_id: str, image_classes: Iterable[ImageClass] = (ImageClass.MACHINE,)) -> Optional[MachineImage]:
        """지원하는 이미지 클래스를 차례로 스캔해 ID가 일치하는 첫 이미지를 반환합니다."""
        for image_class in image_classes:
            for image in self.list_images(image_class):
                if image.provider_machine_image_id == image_id:
                    return image
        return None

    def list_image_status(self, image_class: ImageClass) -> List[ResourceStatus]:
        return [
            ResourceStatus(image.provider_machine_image_id, image.current_state)
            for image in self.list_images(image_class)
        ]
