import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO"):
    """루트 로거에 콘솔 핸들러를 설정합니다. 알 수 없는 레벨 이름은 INFO로 처리합니다."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("vsphere_images").setLevel(numeric_level)
