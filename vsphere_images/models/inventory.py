from dataclasses import dataclass
from typing import Optional

from vsphere_images.models.machine_image import Architecture

# vim.VirtualMachinePowerState 값
POWERED_OFF = "poweredOff"
POWERED_ON = "poweredOn"
SUSPENDED = "suspended"


@dataclass(frozen=True)
class TemplateConfig:
    """하이퍼바이저 VM 설정 스냅샷 중 이미지 매핑에 필요한 부분입니다."""
    uuid: str
    name: str
    guest_id: Optional[str]
    guest_full_name: Optional[str]
    is_template: bool


@dataclass(frozen=True)
class RuntimeInfo:
    power_state: str


@dataclass(frozen=True)
class GuestOsEntry:
    """게스트 OS 카탈로그의 한 항목 (식별자 -> 표시 이름 -> 아키텍처)."""
    identifier: str
    display_name: str
    architecture: Architecture


@dataclass(frozen=True)
class GuestOsMatch:
    """
    카탈로그 조회 결과입니다.
    일치하지 않은 경우에도 원래 식별자를 그대로 들고 있어 대체 추론에 쓸 수 있습니다.
    """
    raw_identifier: Optional[str]
    entry: Optional[GuestOsEntry] = None

    @property
    def matched(self) -> bool:
        return self.entry is not None
