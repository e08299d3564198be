# tests/services/test_inventory_scanner.py
import logging
from unittest.mock import MagicMock, PropertyMock

import pytest
from pyVmomi import vim

from vsphere_images.models import ImageClass, ImageFilterOptions, MachineImageState, Platform, POWERED_ON
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.repositories.pyvmomi import PyvmomiInventoryRepository
from vsphere_images.services.exceptions import RemoteAccessError
from vsphere_images.services.image_mapper import ImageMapper
from vsphere_images.services.inventory_scanner import InventoryScanner
from tests.fakes import FakeVirtualMachine

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def scanner(inventory, mapper) -> InventoryScanner:
    return InventoryScanner(inventory, mapper)

# ===================================================================
#  list_images 테스트 스위트
# ===================================================================
class TestListImages:
    def test_only_templates_are_listed(self, scanner, inventory):
        """템플릿이 아닌 VM은 필터와 상관없이 목록에 나타나지 않아야 합니다."""
        # === Arrange ===
        inventory.vms = [
            FakeVirtualMachine("tmpl-1"),
            FakeVirtualMachine("running-vm", is_template=False),
            FakeVirtualMachine("tmpl-2"),
        ]

        # === Act ===
        images = scanner.list_images()

        # === Assert ===
        assert [image.name for image in images] == ["tmpl-1", "tmpl-2"]
        assert "running-vm" not in [image.name for image in scanner.list_images(ImageFilterOptions(regex="running"))]

    def test_unreadable_entity_does_not_abort_scan(self, scanner, inventory, caplog):
        """세 템플릿 중 하나를 읽을 수 없어도 나머지 두 개는 반환되어야 합니다."""
        # === Arrange ===
        # 시나리오: 검색 직후 다른 호출자가 두 번째 템플릿을 삭제
        caplog.set_level(logging.WARNING)
        inventory.vms = [
            FakeVirtualMachine("tmpl-1"),
            FakeVirtualMachine("tmpl-deleted", readable=False),
            FakeVirtualMachine("tmpl-3"),
        ]

        # === Act ===
        images = scanner.list_images()

        # === Assert ===
        assert [image.name for image in images] == ["tmpl-1", "tmpl-3"]
        assert "tmpl-deleted" in caplog.text

    def test_unmappable_template_is_skipped(self, scanner, inventory):
        inventory.vms = [
            FakeVirtualMachine("tmpl-1", runtime_readable=False),
            FakeVirtualMachine("tmpl-2"),
        ]

        images = scanner.list_images()

        assert [image.name for image in images] == ["tmpl-2"]

    def test_filter_is_applied(self, scanner, inventory):
        inventory.vms = [
            FakeVirtualMachine("ubuntu", guest_id="ubuntu64Guest", guest_full_name="Ubuntu Linux (64-bit)"),
            FakeVirtualMachine("windows", guest_id="windows9Server64Guest",
                               guest_full_name="Microsoft Windows Server 2016 (64-bit)"),
        ]

        images = scanner.list_images(ImageFilterOptions(platform=Platform.WINDOWS))

        assert [image.name for image in images] == ["windows"]

    def test_image_class_is_accepted_as_filter(self, scanner, inventory):
        inventory.vms = [FakeVirtualMachine("tmpl")]

        assert len(scanner.list_images(ImageClass.MACHINE)) == 1
        assert scanner.list_images(ImageClass.KERNEL) == []

    def test_order_follows_search_result(self, scanner, inventory):
        names = ["zeta", "alpha", "mid"]
        inventory.vms = [FakeVirtualMachine(name) for name in names]

        assert [image.name for image in scanner.list_images()] == names

    def test_empty_inventory(self, scanner):
        assert scanner.list_images() == []

    def test_search_failure_is_surfaced(self, mapper):
        """검색 호출 자체의 실패는 부분 결과가 아니라 호출 실패입니다."""
        mock_inventory = MagicMock(spec=IInventoryRepository)
        mock_inventory.search_virtual_machines.side_effect = RemoteAccessError("Error in cluster processing request")
        scanner = InventoryScanner(mock_inventory, mapper)

        with pytest.raises(RemoteAccessError):
            scanner.list_images()

# ===================================================================
#  scan 결과 테스트 스위트
# ===================================================================
class TestScanOutcomes:
    def test_skip_reasons(self, scanner, inventory):
        inventory.vms = [
            FakeVirtualMachine("tmpl"),
            FakeVirtualMachine("vm", is_template=False),
            FakeVirtualMachine("gone", readable=False),
            FakeVirtualMachine("broken", runtime_readable=False),
        ]

        outcomes = scanner.scan()

        assert [outcome.mapped for outcome in outcomes] == [True, False, False, False]
        assert outcomes[1].skip_reason == "not a template"
        assert outcomes[2].skip_reason.startswith("unreadable")
        assert outcomes[3].skip_reason == "unmappable"

    def test_none_entities_are_ignored(self, mapper):
        mock_inventory = MagicMock(spec=IInventoryRepository)
        mock_inventory.search_virtual_machines.return_value = [None]
        scanner = InventoryScanner(mock_inventory, mapper)

        assert scanner.scan() == []

# ===================================================================
#  get_image / list_image_status 테스트 스위트
# ===================================================================
class TestLookup:
    def test_get_image_found(self, scanner, inventory):
        target = FakeVirtualMachine("target")
        inventory.vms = [FakeVirtualMachine("other"), target]

        image = scanner.get_image(target.uuid)

        assert image.name == "target"

    def test_get_image_missing(self, scanner, inventory):
        inventory.vms = [FakeVirtualMachine("other")]

        assert scanner.get_image("no-such-id") is None

    def test_get_image_ignores_non_templates(self, scanner, inventory):
        vm = FakeVirtualMachine("vm", is_template=False)
        inventory.vms = [vm]

        assert scanner.get_image(vm.uuid) is None

    def test_list_image_status(self, scanner, inventory):
        off = FakeVirtualMachine("off")
        on = FakeVirtualMachine("on", power_state=POWERED_ON)
        inventory.vms = [off, on]

        statuses = scanner.list_image_status(ImageClass.MACHINE)

        assert [(s.provider_resource_id, s.resource_status) for s in statuses] == [
            (off.uuid, MachineImageState.ACTIVE),
            (on.uuid, MachineImageState.PENDING),
        ]

# ===================================================================
#  pyVmomi 인벤토리와 함께 사용하는 스캔
# ===================================================================

def make_template_entity(uuid, name):
    entity = MagicMock()
    entity.config.uuid = uuid
    entity.config.name = name
    entity.config.guestId = "ubuntu64Guest"
    entity.config.guestFullName = "Ubuntu Linux (64-bit)"
    entity.config.template = True
    entity.runtime.powerState = "poweredOff"
    return entity

class TestScanWithPyvmomiInventory:
    def test_transport_failure_on_one_entity_keeps_partial_result(self, guest_os_repo, context, caplog):
        """한 엔티티의 속성 조회 중 연결이 끊겨도 나머지 템플릿은 반환되어야 합니다."""
        # === Arrange ===
        caplog.set_level(logging.WARNING)
        broken = MagicMock()
        type(broken).config = PropertyMock(side_effect=ConnectionResetError("reset"))
        si = MagicMock()
        content = si.RetrieveContent.return_value
        datacenter = MagicMock(spec=vim.Datacenter)
        datacenter.name = "DC1"
        content.rootFolder.childEntity = [datacenter]
        content.viewManager.CreateContainerView.return_value.view = [
            make_template_entity("4210-aaaa", "tmpl-1"),
            broken,
            make_template_entity("4210-cccc", "tmpl-3"),
        ]
        inventory = PyvmomiInventoryRepository(lambda: si)
        scanner = InventoryScanner(inventory, ImageMapper(inventory, guest_os_repo, context))

        # === Act ===
        images = scanner.list_images()

        # === Assert ===
        assert [image.name for image in images] == ["tmpl-1", "tmpl-3"]
        assert "reset" in caplog.text
