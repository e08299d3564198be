from sqlalchemy.orm import Session
from vsphere_images.database import models
from vsphere_images.models import Architecture, GuestOsEntry
from vsphere_images.repositories.memory import InMemoryGuestOsRepository

class SqlalchemyGuestOsRepository(InMemoryGuestOsRepository):
    """
    guest_os_types 테이블을 생성 시점에 한 번만 읽어 불변 카탈로그로 고정합니다.
    이후 조회는 DB에 접근하지 않습니다.
    """
    def __init__(self, db_session: Session):
        rows = db_session.query(models.GuestOsType).order_by(models.GuestOsType.identifier).all()
        super().__init__(
            GuestOsEntry(row.identifier, row.display_name, Architecture[row.architecture])
            for row in rows
        )
