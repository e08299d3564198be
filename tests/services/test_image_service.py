# tests/services/test_image_service.py
from unittest.mock import MagicMock

import pytest

from vsphere_images.models import ImageClass, ImageCreateOptions, MachineImageType
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.services.image_service import TemplateImageService
from tests.fakes import FakeVirtualMachine

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def image_service(inventory, guest_os_repo, context) -> TemplateImageService:
    """가짜 인벤토리와 기본 카탈로그로 서비스를 만듭니다."""
    return TemplateImageService(inventory, guest_os_repo, context)

@pytest.fixture
def mock_inventory() -> MagicMock:
    return MagicMock(spec=IInventoryRepository)

# ===================================================================
#  서비스 전반
# ===================================================================
class TestTemplateImageService:
    def test_capabilities_are_built_once(self, image_service):
        first = image_service.get_capabilities()

        assert image_service.get_capabilities() is first
        assert first.supported_image_classes == (ImageClass.MACHINE,)
        assert first.supported_image_types == (MachineImageType.VOLUME,)
        assert first.supports_capture

    def test_is_subscribed(self, image_service):
        assert image_service.is_subscribed() is True

    def test_map_service_action_is_empty(self, image_service):
        assert image_service.map_service_action("IMAGE:LIST") == []

    def test_public_search_makes_no_remote_calls(self, mock_inventory, guest_os_repo, context):
        service = TemplateImageService(mock_inventory, guest_os_repo, context)

        service.search_public_images()
        service.is_image_shared_with_public("ubuntu64Guest")

        assert mock_inventory.method_calls == []

    def test_catalog_images_are_not_discovered_templates(self, image_service, inventory):
        """공개 카탈로그 이미지는 list_images 결과와 겹치지 않아야 합니다."""
        inventory.vms = [FakeVirtualMachine("tmpl")]

        discovered = {image.provider_machine_image_id for image in image_service.list_images()}
        public = {image.provider_machine_image_id for image in image_service.search_public_images()}

        assert discovered.isdisjoint(public)
        assert image_service.get_image("ubuntu64Guest") is None

# ===================================================================
#  캡처 -> 조회 -> 삭제
# ===================================================================
class TestImageLifecycle:
    def test_capture_lookup_and_remove(self, image_service, inventory):
        # === Arrange ===
        source = FakeVirtualMachine("app-01", is_template=False)
        inventory.vms = [source]

        # === Act ===
        image = image_service.capture_image(ImageCreateOptions(virtual_machine_id=source.uuid, name="N"))

        # === Assert ===
        assert image_service.get_image(image.provider_machine_image_id).name == "N"
        assert [i.name for i in image_service.list_images()] == ["N"]
        statuses = image_service.list_image_status(ImageClass.MACHINE)
        assert [s.provider_resource_id for s in statuses] == [image.provider_machine_image_id]

        image_service.remove(image.provider_machine_image_id)

        assert image_service.get_image(image.provider_machine_image_id) is None
        assert inventory.vms == [source]

    def test_remove_unknown_id_does_not_raise(self, image_service, inventory):
        inventory.vms = [FakeVirtualMachine("tmpl")]

        image_service.remove("no-such-id")

        assert len(inventory.vms) == 1
