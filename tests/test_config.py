# tests/test_config.py
import logging

import pytest

from vsphere_images.config import DEFAULT_GUEST_OS_DATABASE_URL, get_env_var, load_settings
from vsphere_images.logger import setup_logging

REQUIRED = {
    "VCENTER_HOST": "vcenter.example.com",
    "VCENTER_USER": "administrator@vsphere.local",
    "VCENTER_PASSWORD": "secret",
}

@pytest.fixture
def clean_env(monkeypatch):
    for key in ("VCENTER_HOST", "VCENTER_USER", "VCENTER_PASSWORD", "VCENTER_PORT", "VCENTER_DATACENTER",
                "SSL_VERIFY", "ACCOUNT_NUMBER", "REGION_ID", "GUEST_OS_DATABASE_URL", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch

def test_get_env_var_default(clean_env):
    assert get_env_var("VCENTER_PORT", default="443") == "443"

def test_get_env_var_missing(clean_env):
    with pytest.raises(ValueError, match="VCENTER_HOST"):
        get_env_var("VCENTER_HOST")

def test_load_settings_defaults(clean_env):
    for key, value in REQUIRED.items():
        clean_env.setenv(key, value)

    settings = load_settings()

    assert settings.vcenter_host == "vcenter.example.com"
    assert settings.vcenter_port == 443
    assert settings.vcenter_datacenter is None
    assert settings.ssl_verify is True
    assert settings.guest_os_database_url == DEFAULT_GUEST_OS_DATABASE_URL
    assert settings.log_level == "INFO"

def test_load_settings_overrides(clean_env):
    for key, value in REQUIRED.items():
        clean_env.setenv(key, value)
    clean_env.setenv("VCENTER_PORT", "8443")
    clean_env.setenv("VCENTER_DATACENTER", "DC1")
    clean_env.setenv("SSL_VERIFY", "False")
    clean_env.setenv("REGION_ID", "dc-west")

    settings = load_settings()

    assert settings.vcenter_port == 8443
    assert settings.vcenter_datacenter == "DC1"
    assert settings.ssl_verify is False
    assert settings.region_id == "dc-west"

def test_load_settings_requires_credentials(clean_env):
    clean_env.setenv("VCENTER_HOST", "vcenter.example.com")

    with pytest.raises(ValueError, match="VCENTER_USER"):
        load_settings()

def test_setup_logging_level():
    setup_logging("debug")
    assert logging.getLogger("vsphere_images").level == logging.DEBUG

    setup_logging("not-a-level")
    assert logging.getLogger("vsphere_images").level == logging.INFO
