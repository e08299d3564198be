from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class ImageClass(Enum):
    MACHINE = "machine"
    KERNEL = "kernel"
    RAMDISK = "ramdisk"


class MachineImageType(Enum):
    VOLUME = "volume"
    STORAGE = "storage"


class MachineImageState(Enum):
    ACTIVE = "active"
    PENDING = "pending"
    DELETED = "deleted"


class Architecture(Enum):
    I32 = "i32"
    I64 = "i64"


class Platform(Enum):
    """
    게스트 운영체제 계열을 대략적으로 분류한 값입니다.
    하이퍼바이저가 정규화된 값을 주지 않으므로 항상 `guess()`로 추정합니다.
    """
    UNKNOWN = "unknown"
    UNIX = "unix"
    UBUNTU = "ubuntu"
    DEBIAN = "debian"
    CENT_OS = "centos"
    RHEL = "rhel"
    FEDORA_CORE = "fedora"
    SUSE = "suse"
    OPEN_SUSE = "opensuse"
    FREE_BSD = "freebsd"
    SOLARIS = "solaris"
    MAC_OS = "macos"
    WINDOWS = "windows"

    @classmethod
    def guess(cls, text: Optional[str]) -> "Platform":
        """
        자유 형식의 OS 이름 또는 게스트 식별자에서 플랫폼을 추정합니다.

        vSphere 게스트 식별자('centos64Guest', 'winNetStandardGuest')와
        전체 이름('Microsoft Windows Server 2019 (64-bit)') 모두를 입력으로 받습니다.

        Args:
            text: 추정에 사용할 문자열. None 또는 빈 문자열이면 UNKNOWN.

        Returns:
            추정된 Platform. 어떤 키워드에도 걸리지 않으면 UNKNOWN.
        """
        if not text:
            return cls.UNKNOWN
        value = text.lower()

        # 'darwin'은 'win'을 포함하므로 Windows보다 먼저 검사
        if "darwin" in value or "mac os" in value or "macos" in value:
            return cls.MAC_OS
        if "windows" in value or "microsoft" in value or value.startswith("win"):
            return cls.WINDOWS
        for keyword, platform in _PLATFORM_KEYWORDS:
            if keyword in value:
                return platform
        if "linux" in value or "unix" in value:
            return cls.UNIX
        return cls.UNKNOWN

    def is_unix(self) -> bool:
        return self not in (Platform.UNKNOWN, Platform.WINDOWS)


# 순서가 중요합니다: 'opensuse'는 'suse'보다 먼저 검사해야 합니다.
_PLATFORM_KEYWORDS = (
    ("ubuntu", Platform.UBUNTU),
    ("debian", Platform.DEBIAN),
    ("centos", Platform.CENT_OS),
    ("rhel", Platform.RHEL),
    ("red hat", Platform.RHEL),
    ("fedora", Platform.FEDORA_CORE),
    ("opensuse", Platform.OPEN_SUSE),
    ("sles", Platform.SUSE),
    ("suse", Platform.SUSE),
    ("freebsd", Platform.FREE_BSD),
    ("solaris", Platform.SOLARIS),
)


@dataclass(frozen=True)
class ProviderContext:
    """이미지의 소유자/리전으로 복사되는 호출자의 현재 컨텍스트입니다."""
    account_number: str
    region_id: str


@dataclass
class MachineImage:
    """
    하이퍼바이저 템플릿 또는 게스트 OS 카탈로그 항목을 나타내는 공급자 중립 이미지입니다.
    조회할 때마다 새로 만들어지며 어디에도 저장되지 않습니다.
    """
    provider_machine_image_id: str
    provider_owner_id: str
    provider_region_id: str
    name: str
    description: str
    architecture: Architecture
    platform: Platform
    current_state: MachineImageState
    image_class: ImageClass = ImageClass.MACHINE
    type: MachineImageType = MachineImageType.VOLUME
    software: str = ""
    tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "id": self.provider_machine_image_id,
            "owner_id": self.provider_owner_id,
            "region_id": self.provider_region_id,
            "name": self.name,
            "description": self.description,
            "image_class": self.image_class.name,
            "type": self.type.name,
            "architecture": self.architecture.name,
            "platform": self.platform.name,
            "state": self.current_state.name,
            "software": self.software,
            "tags": dict(self.tags),
        }


@dataclass(frozen=True)
class ResourceStatus:
    provider_resource_id: str
    resource_status: MachineImageState

    def to_dict(self) -> dict:
        return {"id": self.provider_resource_id, "state": self.resource_status.name}


@dataclass
class ImageCreateOptions:
    """캡처 요청 옵션. `virtual_machine_id`는 원본 VM의 BIOS UUID입니다."""
    virtual_machine_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
