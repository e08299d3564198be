import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from vsphere_images.models.machine_image import Architecture, ImageClass, MachineImage, Platform
from vsphere_images.services.exceptions import ValidationError


@dataclass
class ImageFilterOptions:
    """
    이미지 목록에 적용하는 필터 조건입니다.

    지정된 조건은 모두 만족해야 통과합니다(AND). 지정되지 않은(None) 조건은 무시됩니다.
    `regex`는 이름, 설명, ID 중 하나에서라도 `re.search`로 찾아지면 통과입니다.
    """
    image_class: Optional[ImageClass] = None
    platform: Optional[Platform] = None
    architecture: Optional[Architecture] = None
    account_number: Optional[str] = None
    regex: Optional[str] = None
    tags: Dict[str, str] = field(default_factory=dict)
    _pattern: Optional[re.Pattern] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.regex is not None:
            try:
                self._pattern = re.compile(self.regex)
            except re.error as e:
                raise ValidationError(f"Invalid image filter regex '{self.regex}': {e}") from e

    @classmethod
    def for_class(cls, image_class: ImageClass) -> "ImageFilterOptions":
        return cls(image_class=image_class)

    def matches(self, image: MachineImage) -> bool:
        if self.image_class is not None and image.image_class != self.image_class:
            return False
        if self.architecture is not None and image.architecture != self.architecture:
            return False
        if self.platform is not None and not self._platform_matches(image.platform):
            return False
        if self.account_number is not None and image.provider_owner_id != self.account_number:
            return False
        if self._pattern is not None:
            fields = (image.name, image.description, image.provider_machine_image_id)
            if not any(value and self._pattern.search(value) for value in fields):
                return False
        for key, value in self.tags.items():
            if image.tags.get(key) != value:
                return False
        return True

    def _platform_matches(self, platform: Platform) -> bool:
        # UNIX는 계열 전체(우분투, CentOS 등)를 포함합니다
        if self.platform == Platform.UNIX:
            return platform.is_unix()
        return platform == self.platform
