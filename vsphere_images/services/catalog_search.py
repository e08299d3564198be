from typing import List, Optional

from vsphere_images.catalog.guest_os_identifiers import OTHER_PREFIX
from vsphere_images.models import ImageFilterOptions, MachineImage
from vsphere_images.repositories.interfaces import IGuestOsRepository
from vsphere_images.services.image_mapper import ImageMapper

class CatalogSearch:
    """게스트 OS 카탈로그에서 직접 공개 이미지를 만듭니다. 원격 호출은 하지 않습니다."""

    def __init__(self, guest_os_repo: IGuestOsRepository, mapper: ImageMapper, reserved_prefix: str = OTHER_PREFIX):
        self.guest_os_repo = guest_os_repo
        self.mapper = mapper
        self.reserved_prefix = reserved_prefix

    def search_public_images(self, options: Optional[ImageFilterOptions] = None) -> List[MachineImage]:
        images = []
        for entry in self.guest_os_repo.list_entries():
            if entry.identifier.startswith(self.reserved_prefix):
                continue
            image = self.mapper.catalog_image(entry)
            if options is None or options.matches(image):
                images.append(image)
        return images

    def is_image_shared_with_public(self, image_id: str) -> bool:
        return self.guest_os_repo.contains(image_id)
