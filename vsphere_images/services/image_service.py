import logging
from typing import List, Optional, Union

from vsphere_images.models import (
    AsynchronousTask,
    ImageClass,
    ImageCreateOptions,
    ImageFilterOptions,
    MachineImage,
    ProviderContext,
    ResourceStatus,
)
from vsphere_images.repositories.interfaces import IGuestOsRepository, IInventoryRepository
from vsphere_images.services.capabilities import TemplateCapabilities
from vsphere_images.services.capture_workflow import CaptureWorkflow
from vsphere_images.services.catalog_search import CatalogSearch
from vsphere_images.services.image_mapper import ImageMapper
from vsphere_images.services.image_remover import ImageRemover
from vsphere_images.services.inventory_scanner import InventoryScanner

logger = logging.getLogger(__name__)

class TemplateImageService:
    def __init__(self, inventory: IInventoryRepository, guest_os_repo: IGuestOsRepository, context: ProviderContext):
        """
        vSphere 템플릿을 공급자 중립 이미지로 노출하는 서비스를 초기화합니다.

        Args:
            inventory: vCenter 인벤토리에 접근하는 리포지토리.
            guest_os_repo: 게스트 OS 카탈로그.
            context: 이미지의 소유자/리전으로 복사될 호출자 컨텍스트.
        """
        self.inventory = inventory
        self.guest_os_repo = guest_os_repo
        self.context = context
        self.capabilities = TemplateCapabilities()

        self.mapper = ImageMapper(inventory, guest_os_repo, context)
        self.scanner = InventoryScanner(inventory, self.mapper)
        self.capture_workflow = CaptureWorkflow(inventory, self.mapper)
        self.catalog_search = CatalogSearch(guest_os_repo, self.mapper)
        self.remover = ImageRemover(inventory)

    def get_capabilities(self) -> TemplateCapabilities:
        return self.capabilities

    def get_image(self, image_id: str) -> Optional[MachineImage]:
        """
        ID로 템플릿 이미지를 찾습니다. 인덱스 없이 매번 인벤토리 전체를 스캔합니다.

        Returns:
            일치하는 MachineImage. 없으면 None (방금 삭제된 경우 포함).
        """
        return self.scanner.get_image(image_id, self.capabilities.supported_image_classes)

    def list_images(self, filter_or_class: Union[ImageFilterOptions, ImageClass, None] = None) -> List[MachineImage]:
        return self.scanner.list_images(filter_or_class)

    def list_image_status(self, image_class: ImageClass) -> List[ResourceStatus]:
        return self.scanner.list_image_status(image_class)

    def capture_image(self, options: ImageCreateOptions, task: Optional[AsynchronousTask] = None) -> MachineImage:
        return self.capture_workflow.capture(options, task)

    def remove(self, image_id: str, check_state: bool = False) -> None:
        removed = self.remover.remove(image_id, check_state)
        if not removed:
            logger.info("No template removed for image %s", image_id)

    def search_public_images(self, options: Optional[ImageFilterOptions] = None) -> List[MachineImage]:
        return self.catalog_search.search_public_images(options)

    def is_image_shared_with_public(self, image_id: str) -> bool:
        return self.catalog_search.is_image_shared_with_public(image_id)

    def is_subscribed(self) -> bool:
        return True

    def map_service_action(self, action: str) -> List[str]:
        # vSphere에는 대응하는 IAM 액션이 없음
        return []
