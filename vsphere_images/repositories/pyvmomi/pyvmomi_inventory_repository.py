import http.client
import logging
from contextlib import contextmanager
from typing import Callable, List, Optional

from pyVim.task import WaitForTask
from pyVmomi import vim, vmodl

from vsphere_images.models import RuntimeInfo, TemplateConfig
from vsphere_images.repositories.interfaces import IInventoryRepository
from vsphere_images.services.exceptions import (
    AuthenticationError,
    DatacenterNotFoundError,
    RemoteAccessError,
    TransientMappingError,
)
from vsphere_images.utils.clone_spec_builder import generate_clone_spec

logger = logging.getLogger(__name__)

# 엔티티 하나의 속성 조회 실패. 검색 전체가 아니라 그 엔티티만 건너뜁니다.
_ENTITY_READ_ERRORS = (vmodl.MethodFault, OSError, http.client.HTTPException)


def _fault_message(error: Exception) -> str:
    return getattr(error, "msg", None) or str(error)


@contextmanager
def _translate_faults():
    """인증이 풀린 세션은 AuthenticationError로, 그 밖의 vCenter fault와 전송 오류는 RemoteAccessError로 바꿉니다."""
    try:
        yield
    except vim.fault.NotAuthenticated as e:
        raise AuthenticationError(f"vCenter session is not authenticated: {_fault_message(e)}") from e
    except vmodl.query.InvalidProperty as e:
        raise RemoteAccessError(f"No virtual machine support in cluster: {_fault_message(e)}") from e
    except vmodl.RuntimeFault as e:
        raise RemoteAccessError(f"Error in processing request to cluster: {_fault_message(e)}") from e
    except (vmodl.MethodFault, OSError, http.client.HTTPException) as e:
        raise RemoteAccessError(f"Error in cluster processing request: {_fault_message(e)}") from e


class PyvmomiInventoryRepository(IInventoryRepository):
    def __init__(self, service_instance_provider: Callable[[], Optional[vim.ServiceInstance]],
                 datacenter_name: Optional[str] = None):
        """
        pyVmomi로 vCenter 인벤토리에 접근하는 리포지토리를 초기화합니다.

        Args:
            service_instance_provider: 현재 ServiceInstance(없으면 None)를 돌려주는 함수.
            datacenter_name: VM 폴더를 찾을 데이터센터 이름. 생략하면 첫 번째 데이터센터.
        """
        self.service_instance_provider = service_instance_provider
        self.datacenter_name = datacenter_name

    def _get_service_instance(self):
        si = self.service_instance_provider()
        if si is None:
            raise AuthenticationError("Unauthorized")
        return si

    def _get_vm_folder(self, content):
        for entity in content.rootFolder.childEntity:
            if not isinstance(entity, vim.Datacenter):
                continue
            if self.datacenter_name is None or entity.name == self.datacenter_name:
                return entity.vmFolder
        raise DatacenterNotFoundError(f"Datacenter '{self.datacenter_name or '<any>'}' not found.")

    def search_virtual_machines(self) -> List[vim.VirtualMachine]:
        """
        루트 VM 폴더 아래의 VirtualMachine 엔티티를 재귀적으로 검색합니다.

        템플릿 여부와 상관없이 모든 VM을 vCenter가 돌려준 순서대로 반환합니다.

        Raises:
            AuthenticationError: 세션이 없을 때.
            DatacenterNotFoundError: 설정된 데이터센터가 없을 때.
            RemoteAccessError: 검색 중 fault 또는 전송 오류가 났을 때.
        """
        with _translate_faults():
            si = self._get_service_instance()
            content = si.RetrieveContent()
            folder = self._get_vm_folder(content)
            view = content.viewManager.CreateContainerView(
                container=folder, type=[vim.VirtualMachine], recursive=True
            )
            try:
                vms = list(view.view)
            finally:
                view.Destroy()
        logger.debug("Found %d virtual machines under %s", len(vms), getattr(folder, "name", folder))
        return vms

    def read_config(self, entity: vim.VirtualMachine) -> TemplateConfig:
        try:
            config = entity.config
        except _ENTITY_READ_ERRORS as e:
            # 검색 직후 삭제되었거나 이 엔티티의 속성 조회만 실패한 경우
            raise TransientMappingError(f"Virtual machine is no longer readable: {_fault_message(e)}") from e
        if config is None:
            raise TransientMappingError(f"Configuration is not available for {entity}.")
        return TemplateConfig(
            uuid=config.uuid,
            name=config.name,
            guest_id=config.guestId,
            guest_full_name=config.guestFullName,
            is_template=bool(config.template),
        )

    def read_runtime(self, entity: vim.VirtualMachine) -> Optional[RuntimeInfo]:
        try:
            runtime = entity.runtime
        except _ENTITY_READ_ERRORS as e:
            raise TransientMappingError(f"Runtime is no longer readable: {_fault_message(e)}") from e
        if runtime is None or runtime.powerState is None:
            return None
        return RuntimeInfo(power_state=str(runtime.powerState))

    def find_virtual_machine(self, vm_id: str) -> Optional[vim.VirtualMachine]:
        with _translate_faults():
            si = self._get_service_instance()
            return si.RetrieveContent().searchIndex.FindByUuid(None, vm_id, True)

    def clone(self, entity: vim.VirtualMachine, name: str, as_template: bool = True) -> vim.VirtualMachine:
        """
        VM을 같은 폴더에 복제하고, 작업이 끝날 때까지 기다린 뒤 새 엔티티를 반환합니다.

        Raises:
            RemoteAccessError: 복제 작업이 실패했을 때.
        """
        spec = generate_clone_spec(as_template=as_template)
        with _translate_faults():
            si = self._get_service_instance()
            task = entity.CloneVM_Task(folder=entity.parent, name=name, spec=spec)
            WaitForTask(task, si=si)
            return task.info.result

    def destroy(self, entity: vim.VirtualMachine) -> None:
        with _translate_faults():
            si = self._get_service_instance()
            try:
                WaitForTask(entity.Destroy_Task(), si=si)
            except vmodl.fault.ManagedObjectNotFound as e:
                raise TransientMappingError(f"Virtual machine disappeared before destroy: {_fault_message(e)}") from e
