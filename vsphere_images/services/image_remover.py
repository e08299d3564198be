import logging

from vsphere_images.models import POWERED_OFF
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.services.exceptions import TransientMappingError

logger = logging.getLogger(__name__)

class ImageRemover:
    def __init__(self, inventory: IInventoryRepository):
        self.inventory = inventory

    def remove(self, image_id: str, check_state: bool = False) -> int:
        """
        ID가 일치하는 템플릿을 찾아 하이퍼바이저에서 삭제합니다.

        일치하는 엔티티가 없거나 템플릿이 아니면 아무것도 하지 않습니다.
        삭제 도중 엔티티가 사라지는 등 개별 실패는 로그만 남기고 계속 진행합니다.

        Args:
            image_id: 삭제할 이미지(템플릿 UUID).
            check_state: True이면 전원이 꺼진(ACTIVE) 템플릿만 삭제합니다.

        Returns:
            실제로 삭제한 템플릿의 수.

        Raises:
            AuthenticationError: 세션이 없을 때.
            RemoteAccessError: 검색 또는 삭제 호출이 원격 오류로 실패했을 때.
        """
        removed = 0
        for entity in self.inventory.search_virtual_machines():
            if entity is None:
                continue
            try:
                config = self.inventory.read_config(entity)
            except TransientMappingError as e:
                logger.warning("Skipping unreadable virtual machine %s: %s", entity, e)
                continue
            if config.uuid != image_id:
                continue

            if not config.is_template:
                # TODO: 템플릿이 아닌 VM과 일치한 경우를 호출자에게 실패로 알릴지 결정
                logger.warning("Image %s matches virtual machine '%s', which is not a template; not removing.",
                               image_id, config.name)
                continue
            try:
                if check_state and not self._is_powered_off(entity):
                    logger.warning("Template %s is not powered off; not removing.", image_id)
                    continue
                self.inventory.destroy(entity)
                removed += 1
                logger.info("Removed template '%s' (%s)", config.name, image_id)
            except TransientMappingError as e:
                logger.warning("Failed to remove template %s: %s", image_id, e)
        return removed

    def _is_powered_off(self, entity) -> bool:
        runtime = self.inventory.read_runtime(entity)
        return runtime is None or runtime.power_state == POWERED_OFF
