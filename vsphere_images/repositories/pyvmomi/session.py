import atexit
import logging
import threading

from pyVim.connect import Disconnect, SmartConnect
from pyVmomi import vim, vmodl

from vsphere_images.config import Settings

logger = logging.getLogger(__name__)


class ServiceInstanceProvider:
    """
    vCenter ServiceInstance를 연결해 공유합니다.
    유휴 시간 초과 등으로 세션이 만료되면 다음 호출에서 다시 연결합니다.
    연결에 실패하면 None을 반환하며, 호출 쪽에서 AuthenticationError로 처리합니다.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._lock = threading.Lock()
        self._service_instance = None
        self._disconnect_registered = False

    def __call__(self):
        with self._lock:
            if self._service_instance is not None and not self._is_authenticated(self._service_instance):
                logger.info("vCenter session on %s expired; reconnecting", self.settings.vcenter_host)
                self._service_instance = None
            if self._service_instance is None:
                self._service_instance = self._connect()
            return self._service_instance

    @staticmethod
    def _is_authenticated(si) -> bool:
        try:
            return si.RetrieveContent().sessionManager.currentSession is not None
        except vim.fault.NotAuthenticated:
            return False

    def _connect(self):
        try:
            si = SmartConnect(
                host=self.settings.vcenter_host,
                user=self.settings.vcenter_user,
                pwd=self.settings.vcenter_password,
                port=self.settings.vcenter_port,
                disableSslCertValidation=not self.settings.ssl_verify,
            )
        except (vmodl.MethodFault, OSError) as e:
            logger.error("Failed to connect to vCenter %s: %s", self.settings.vcenter_host, e)
            return None
        if not self._disconnect_registered:
            atexit.register(self.disconnect)
            self._disconnect_registered = True
        return si

    def disconnect(self):
        """현재 세션을 닫습니다. 프로세스 종료 시 자동으로 호출됩니다."""
        with self._lock:
            if self._service_instance is not None:
                Disconnect(self._service_instance)
                self._service_instance = None
