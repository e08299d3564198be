# tests/conftest.py
import pytest

from vsphere_images.catalog.guest_os_identifiers import DEFAULT_GUEST_OS_ENTRIES
from vsphere_images.models import ProviderContext
from vsphere_images.repositories.memory import InMemoryGuestOsRepository
from vsphere_images.services.image_mapper import ImageMapper
from tests.fakes import FakeInventory


@pytest.fixture
def context() -> ProviderContext:
    """이미지에 복사될 소유자/리전 컨텍스트."""
    return ProviderContext(account_number="acct-1", region_id="dc-east")


@pytest.fixture
def guest_os_repo() -> InMemoryGuestOsRepository:
    """기본 게스트 OS 테이블로 만든 카탈로그."""
    return InMemoryGuestOsRepository(DEFAULT_GUEST_OS_ENTRIES)


@pytest.fixture
def inventory() -> FakeInventory:
    """비어 있는 가짜 인벤토리. 테스트마다 vms를 채워 사용합니다."""
    return FakeInventory()


@pytest.fixture
def mapper(inventory, guest_os_repo, context) -> ImageMapper:
    return ImageMapper(inventory, guest_os_repo, context)
