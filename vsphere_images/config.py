# vsphere_images/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GUEST_OS_DATABASE_URL = "sqlite:///guest_os_catalog.db"


def get_env_var(var_name: str, default: Optional[str] = None) -> str:
    value = os.getenv(var_name, default)
    if value is None:
        raise ValueError(f"Please check if you have set the environment variable {var_name}.")
    return value


@dataclass(frozen=True)
class Settings:
    vcenter_host: str
    vcenter_user: str
    vcenter_password: str
    vcenter_port: int
    vcenter_datacenter: Optional[str]
    ssl_verify: bool
    account_number: str
    region_id: str
    guest_os_database_url: str
    log_level: str


def load_settings() -> Settings:
    """
    환경 변수(.env 포함)에서 설정을 읽어옵니다.

    Raises:
        ValueError: 필수 변수(VCENTER_HOST, VCENTER_USER, VCENTER_PASSWORD)가 없을 때.
    """
    return Settings(
        vcenter_host=get_env_var("VCENTER_HOST"),
        vcenter_user=get_env_var("VCENTER_USER"),
        vcenter_password=get_env_var("VCENTER_PASSWORD"),
        vcenter_port=int(get_env_var("VCENTER_PORT", default="443")),
        vcenter_datacenter=os.getenv("VCENTER_DATACENTER") or None,
        ssl_verify=get_env_var("SSL_VERIFY", default="true").lower() == "true",
        account_number=get_env_var("ACCOUNT_NUMBER", default="vsphere"),
        region_id=get_env_var("REGION_ID", default="default"),
        guest_os_database_url=get_env_var("GUEST_OS_DATABASE_URL", default=DEFAULT_GUEST_OS_DATABASE_URL),
        log_level=get_env_var("LOG_LEVEL", default="INFO"),
    )
