import logging
from typing import Optional

from vsphere_images.models import AsynchronousTask, ImageCreateOptions, MachineImage
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.services.image_mapper import ImageMapper
from vsphere_images.services.exceptions import (
    ImageCaptureError,
    ValidationError,
    VirtualMachineNotFoundError,
)

logger = logging.getLogger(__name__)

class CaptureWorkflow:
    def __init__(self, inventory: IInventoryRepository, mapper: ImageMapper):
        self.inventory = inventory
        self.mapper = mapper

    def capture(self, options: ImageCreateOptions, task: Optional[AsynchronousTask] = None) -> MachineImage:
        """
        실행 중인 VM을 복제해 새 템플릿을 만들고, 그 템플릿의 이미지를 반환합니다.

        호출 자체는 동기적으로 끝나며, task가 주어지면 결과 이미지(또는 실패 예외)로
        완료 처리합니다.

        Args:
            options: 원본 VM ID와 새 템플릿 이름을 담은 캡처 옵션.
            task: 완료를 알릴 비동기 결과 핸들 (선택).

        Returns:
            새로 만들어진 템플릿의 MachineImage.

        Raises:
            ValidationError: 원본 VM ID가 없을 때. 원격 호출 전에 검사합니다.
            VirtualMachineNotFoundError: 원본 VM을 찾을 수 없을 때.
            RemoteAccessError: 복제 호출 자체가 실패했을 때.
            ImageCaptureError: 복제는 됐지만 새 템플릿을 확인하지 못했을 때.
        """
        vm_id = options.virtual_machine_id
        if not vm_id:
            raise ValidationError("You must specify a virtual machine to capture.")

        try:
            image = self._clone_as_template(vm_id, options.name or f"{vm_id}-template")
        except Exception as e:
            if task is not None and not task.is_complete:
                task.complete_with_error(e)
            raise

        if task is not None and not task.is_complete:
            task.complete_with_result(image)
        return image

    def _clone_as_template(self, vm_id: str, name: str) -> MachineImage:
        vm = self.inventory.find_virtual_machine(vm_id)
        if vm is None:
            raise VirtualMachineNotFoundError(f"No such virtual machine for imaging: {vm_id}")

        logger.info("Capturing virtual machine %s as template '%s'", vm_id, name)
        clone = self.inventory.clone(vm, name, as_template=True)

        image = self.mapper.to_machine_image(clone)
        if image is None:
            raise ImageCaptureError(f"Failed to identify newly created template '{name}' from {vm_id}.")

        logger.info("Captured template '%s' as image %s", name, image.provider_machine_image_id)
        return image
