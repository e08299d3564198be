# vsphere_images/utils/clone_spec_builder.py
from pyVmomi import vim


def generate_clone_spec(as_template=True, power_on=False, datastore=None, resource_pool=None):
    """
    CloneVM_Task에 넘길 CloneSpec을 만듭니다.

    템플릿으로 복제할 때는 전원을 켤 수 없으므로 power_on은 무시됩니다.
    datastore/resource_pool을 생략하면 원본 VM과 같은 위치에 만들어집니다.
    """
    relocate_spec = vim.vm.RelocateSpec()
    if datastore is not None:
        relocate_spec.datastore = datastore
    if resource_pool is not None:
        relocate_spec.pool = resource_pool

    return vim.vm.CloneSpec(
        location=relocate_spec,
        powerOn=False if as_template else power_on,
        template=as_template,
    )
