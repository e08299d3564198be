import logging
from typing import Any, Optional

from vsphere_images.models import (
    Architecture,
    GuestOsEntry,
    ImageClass,
    MachineImage,
    MachineImageState,
    MachineImageType,
    Platform,
    ProviderContext,
    RuntimeInfo,
    TemplateConfig,
    POWERED_OFF,
)
from vsphere_images.repositories.interfaces import IGuestOsRepository, IInventoryRepository
from vsphere_images.services.exceptions import TransientMappingError

logger = logging.getLogger(__name__)


def guess_architecture(identifier: Optional[str]) -> Architecture:
    """
    카탈로그에 없는 게스트 식별자에서 아키텍처를 추정합니다.
    vSphere 식별자는 64비트 변형에만 '64'가 들어갑니다 ('centos64Guest', 'otherGuest64').
    """
    if identifier and "64" in identifier:
        return Architecture.I64
    return Architecture.I32


def image_state_for(runtime: Optional[RuntimeInfo]) -> MachineImageState:
    """전원이 꺼져 있을 때만 ACTIVE. 런타임 정보가 없으면 꺼진 것으로 봅니다."""
    power_state = runtime.power_state if runtime is not None else POWERED_OFF
    if power_state == POWERED_OFF:
        return MachineImageState.ACTIVE
    return MachineImageState.PENDING


class ImageMapper:
    def __init__(self, inventory: IInventoryRepository, guest_os_repo: IGuestOsRepository, context: ProviderContext):
        self.inventory = inventory
        self.guest_os_repo = guest_os_repo
        self.context = context

    def to_machine_image(self, entity: Any, config: Optional[TemplateConfig] = None) -> Optional[MachineImage]:
        """
        하이퍼바이저 템플릿 엔티티 하나를 MachineImage로 변환합니다.

        게스트 식별자가 카탈로그와 정확히 일치하면 카탈로그의 아키텍처와
        게스트 전체 이름으로 추정한 플랫폼을 사용합니다. 일치하지 않으면
        식별자 문자열 자체에서 플랫폼과 아키텍처를 추정합니다.

        Args:
            entity: 인벤토리 리포지토리가 반환한 VM 엔티티.
            config: 이미 읽어 둔 설정 스냅샷. 생략하면 여기서 읽습니다.

        Returns:
            변환된 MachineImage. 엔티티가 없거나 설정/런타임을 읽을 수 없으면 None.
        """
        if entity is None:
            return None
        try:
            if config is None:
                config = self.inventory.read_config(entity)
            runtime = self.inventory.read_runtime(entity)
        except TransientMappingError as e:
            logger.warning("Could not read template %s: %s", entity, e)
            return None

        match = self.guest_os_repo.match(config.guest_id)
        if match.matched:
            architecture = self._architecture_for(match.entry)
            platform = Platform.guess(config.guest_full_name)
        else:
            logger.debug("No such guest in catalog: %s", config.guest_id)
            architecture = guess_architecture(match.raw_identifier)
            platform = Platform.guess(match.raw_identifier)

        return MachineImage(
            provider_machine_image_id=config.uuid,
            provider_owner_id=self.context.account_number,
            provider_region_id=self.context.region_id,
            name=config.name,
            description=config.name,
            architecture=architecture,
            platform=platform,
            current_state=image_state_for(runtime),
            image_class=ImageClass.MACHINE,
            type=MachineImageType.VOLUME,
        )

    def catalog_image(self, entry: GuestOsEntry) -> MachineImage:
        """게스트 OS 카탈로그 항목으로 공개 이미지(실제 엔티티 없음)를 만듭니다."""
        return MachineImage(
            provider_machine_image_id=entry.identifier,
            provider_owner_id=self.context.account_number,
            provider_region_id=self.context.region_id,
            name=entry.display_name,
            description=entry.display_name,
            architecture=self._architecture_for(entry),
            platform=Platform.guess(entry.identifier),
            current_state=MachineImageState.ACTIVE,
            image_class=ImageClass.MACHINE,
            type=MachineImageType.VOLUME,
        )

    def _architecture_for(self, entry: GuestOsEntry) -> Architecture:
        return self.guest_os_repo.architecture_of(entry.display_name) or entry.architecture
