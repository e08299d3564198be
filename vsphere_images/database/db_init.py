import logging
from typing import Iterable, Optional

from .database import engine as default_engine, SessionLocal, Base
from .models import GuestOsType
from vsphere_images.catalog.guest_os_identifiers import DEFAULT_GUEST_OS_ENTRIES
from vsphere_images.models import GuestOsEntry

logger = logging.getLogger(__name__)

def initialize_db(engine=None, session_factory=None, entries: Optional[Iterable[GuestOsEntry]] = None) -> int:
    """
    게스트 OS 카탈로그 테이블을 만들고, 비어 있으면 기본 데이터를 넣습니다.

    Args:
        engine: 테이블을 만들 엔진. 생략하면 기본 엔진.
        session_factory: 세션 팩토리. 생략하면 기본 SessionLocal.
        entries: 넣을 항목. 생략하면 DEFAULT_GUEST_OS_ENTRIES.

    Returns:
        새로 삽입한 행의 수. 이미 데이터가 있으면 0.
    """
    engine = engine or default_engine
    session_factory = session_factory or SessionLocal
    entries = DEFAULT_GUEST_OS_ENTRIES if entries is None else tuple(entries)

    Base.metadata.create_all(bind=engine)

    db = session_factory()
    try:
        if db.query(GuestOsType).first():
            logger.info("Guest OS catalog already populated; skipping seed.")
            return 0

        for entry in entries:
            db.add(GuestOsType(
                identifier=entry.identifier,
                display_name=entry.display_name,
                architecture=entry.architecture.name,
            ))
        db.commit()
        logger.info("Seeded %d guest OS types.", len(entries))
        return len(entries)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    initialize_db()
