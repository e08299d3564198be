from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from vsphere_images.config import DEFAULT_GUEST_OS_DATABASE_URL, get_env_var

# 게스트 OS 카탈로그 DB 연결 문자열 (기본값은 SQLite 파일)
SQLALCHEMY_DATABASE_URL = get_env_var("GUEST_OS_DATABASE_URL", default=DEFAULT_GUEST_OS_DATABASE_URL)


def create_session_factory(database_url: str):
    """
    주어진 URL로 엔진을 만들고 세션 팩토리를 반환합니다.
    SQLite일 때만 check_same_thread 옵션이 필요합니다.
    """
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    engine = create_engine(database_url, connect_args=connect_args)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine, SessionLocal = create_session_factory(SQLALCHEMY_DATABASE_URL)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
