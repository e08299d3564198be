from dataclasses import dataclass
from typing import Tuple

from vsphere_images.models import ImageClass, MachineImageType


@dataclass(frozen=True)
class TemplateCapabilities:
    """
    vSphere 템플릿 이미지 지원이 할 수 있는 것과 없는 것을 설명합니다.
    불변 객체이므로 서비스 생성 시 한 번 만들어 여러 스레드에서 그대로 읽습니다.
    """
    provider_term: str = "template"
    supported_image_classes: Tuple[ImageClass, ...] = (ImageClass.MACHINE,)
    supported_image_types: Tuple[MachineImageType, ...] = (MachineImageType.VOLUME,)
    supports_capture: bool = True
    supports_remove: bool = True
    supports_public_library: bool = True
    supports_image_sharing: bool = False
    supports_image_sharing_with_public: bool = False
    supports_bundling: bool = False
    supports_direct_image_upload: bool = False

    def supports_image_class(self, image_class: ImageClass) -> bool:
        return image_class in self.supported_image_classes
