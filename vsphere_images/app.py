# vsphere_images/app.py
from wsgiref.simple_server import make_server
from functools import lru_cache
from urllib.parse import parse_qs
import json
import logging
import re

from vsphere_images.config import get_env_var, load_settings
from vsphere_images.database.database import create_session_factory
from vsphere_images.database.db_init import initialize_db
from vsphere_images.logger import setup_logging
from vsphere_images.models import Architecture, ImageClass, ImageCreateOptions, ImageFilterOptions, Platform, ProviderContext
from vsphere_images.repositories.pyvmomi import PyvmomiInventoryRepository, ServiceInstanceProvider
from vsphere_images.repositories.sqlalchemy import SqlalchemyGuestOsRepository
from vsphere_images.services.image_service import TemplateImageService
from vsphere_images.services.exceptions import (
    AuthenticationError,
    ImageCaptureError,
    ImageNotFoundError,
    NotFoundError,
    RemoteAccessError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        return json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValidationError("Invalid or missing JSON body.")

def get_query(environ):
    return {key: values[-1] for key, values in parse_qs(environ.get("QUERY_STRING", "")).items()}

def _enum_value(enum_type, query, key):
    value = query.get(key)
    if value is None:
        return None
    try:
        return enum_type[value.upper()]
    except KeyError:
        raise ValidationError(f"Unknown {key} '{value}'.")

def get_filter_options(environ):
    """쿼리 문자열(class, platform, architecture, regex)로 필터를 만듭니다. 조건이 없으면 None."""
    query = get_query(environ)
    options = ImageFilterOptions(
        image_class=_enum_value(ImageClass, query, "class"),
        platform=_enum_value(Platform, query, "platform"),
        architecture=_enum_value(Architecture, query, "architecture"),
        regex=query.get("regex"),
    )
    if options == ImageFilterOptions():
        return None
    return options

ERROR_MAP = (
    (ValidationError, "400 Bad Request"),
    (AuthenticationError, "401 Unauthorized"),
    (NotFoundError, "404 Not Found"),
    (RemoteAccessError, "502 Bad Gateway"),
    (ImageCaptureError, "502 Bad Gateway"),
)

def handle_exception(e):
    for error_type, status in ERROR_MAP:
        if isinstance(e, error_type):
            return status, json.dumps({"error": str(e)})
    logger.exception("Unhandled error while serving request")
    return "500 Internal Server Error", json.dumps({"error": str(e)})

# --------------------------------------------------------------------------
## 의존성 생성
# --------------------------------------------------------------------------

@lru_cache(maxsize=None)
def get_settings():
    return load_settings()

@lru_cache(maxsize=None)
def get_service_instance_provider():
    return ServiceInstanceProvider(get_settings())

@lru_cache(maxsize=None)
def get_guest_os_repository():
    # 카탈로그는 프로세스 동안 바뀌지 않으므로 한 번만 읽습니다. 새 DB면 기본 데이터를 먼저 넣습니다.
    engine, session_factory = create_session_factory(get_settings().guest_os_database_url)
    initialize_db(engine=engine, session_factory=session_factory)
    db_session = session_factory()
    try:
        return SqlalchemyGuestOsRepository(db_session)
    finally:
        db_session.close()

def build_image_service():
    settings = get_settings()
    inventory = PyvmomiInventoryRepository(get_service_instance_provider(), settings.vcenter_datacenter)
    context = ProviderContext(settings.account_number, settings.region_id)
    return TemplateImageService(inventory, get_guest_os_repository(), context)

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (라우팅)
# --------------------------------------------------------------------------

def application(environ, start_response):
    try:
        if 'services' not in environ:
            environ['services'] = {'image': build_image_service()}

        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")

        routes = [
            ('GET', r'^/v1/capabilities$', capabilities_handler),
            ('GET', r'^/v1/images$', list_images_handler),
            ('POST', r'^/v1/images$', capture_image_handler),
            ('GET', r'^/v1/images/status$', list_image_status_handler),
            ('GET', r'^/v1/images/public$', search_public_images_handler),
            ('GET', r'^/v1/images/([^/]+)/public$', image_public_handler),
            ('GET', r'^/v1/images/([^/]+)$', get_image_handler),
            ('DELETE', r'^/v1/images/([^/]+)$', remove_image_handler),
        ]

        handler, path_args = None, []
        for route_method, pattern, route_handler in routes:
            if method == route_method and (match := re.match(pattern, path)):
                handler, path_args = route_handler, match.groups()
                break

        if handler:
            status, response_body = handler(environ, *path_args)
        else:
            status, response_body = '404 Not Found', json.dumps({'error': 'Not Found'})

    except Exception as e:
        status, response_body = handle_exception(e)

    start_response(status, [("Content-Type", "application/json")])
    return [response_body.encode("utf-8")]

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def capabilities_handler(environ, *args):
    capabilities = environ['services']['image'].get_capabilities()
    return '200 OK', json.dumps({
        "provider_term": capabilities.provider_term,
        "image_classes": [cls.name for cls in capabilities.supported_image_classes],
        "image_types": [t.name for t in capabilities.supported_image_types],
        "supports_capture": capabilities.supports_capture,
        "supports_public_library": capabilities.supports_public_library,
    })

def list_images_handler(environ, *args):
    images = environ['services']['image'].list_images(get_filter_options(environ))
    return '200 OK', json.dumps({'images': [image.to_dict() for image in images]})

def list_image_status_handler(environ, *args):
    image_class = _enum_value(ImageClass, get_query(environ), "class") or ImageClass.MACHINE
    statuses = environ['services']['image'].list_image_status(image_class)
    return '200 OK', json.dumps({'statuses': [status.to_dict() for status in statuses]})

def search_public_images_handler(environ, *args):
    images = environ['services']['image'].search_public_images(get_filter_options(environ))
    return '200 OK', json.dumps({'images': [image.to_dict() for image in images]})

def image_public_handler(environ, image_id):
    shared = environ['services']['image'].is_image_shared_with_public(image_id)
    return '200 OK', json.dumps({'id': image_id, 'shared_with_public': shared})

def get_image_handler(environ, image_id):
    image = environ['services']['image'].get_image(image_id)
    if image is None:
        raise ImageNotFoundError(f"Image '{image_id}' not found.")
    return '200 OK', json.dumps(image.to_dict())

def capture_image_handler(environ, *args):
    data = get_request_data(environ)
    options = ImageCreateOptions(
        virtual_machine_id=data.get('virtual_machine_id'),
        name=data.get('name'),
        description=data.get('description'),
    )
    image = environ['services']['image'].capture_image(options)
    return '201 Created', json.dumps(image.to_dict())

def remove_image_handler(environ, image_id):
    check_state = get_query(environ).get('check_state', 'false').lower() == 'true'
    environ['services']['image'].remove(image_id, check_state)
    return '204 No Content', ''

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    # 설정 오류는 요청을 받기 전에 드러나야 합니다
    settings = get_settings()
    setup_logging(settings.log_level)
    get_guest_os_repository()
    port = int(get_env_var("APP_PORT", default="8000"))
    with make_server("", port, application) as httpd:
        logger.info("Serving vSphere template images on port %d...", port)
        httpd.serve_forever()
