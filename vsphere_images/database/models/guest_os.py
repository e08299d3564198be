from sqlalchemy import Column, String
from ..database import Base

class GuestOsType(Base):
    """
    vSphere가 인식하는 게스트 OS 식별자 하나를 나타냅니다.
    (예: 'ubuntu64Guest' -> 'Ubuntu Linux (64 bit)', I64).
    공개 이미지 카탈로그와 아키텍처 추론의 데이터 원본입니다.
    """
    __tablename__ = "guest_os_types"
    identifier = Column(String, primary_key=True)
    display_name = Column(String, unique=True, nullable=False)
    architecture = Column(String, nullable=False)
