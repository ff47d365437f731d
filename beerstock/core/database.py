from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from beerstock.core.config import settings

# DB 접속 URL
DB_URL = settings.db_url

# SQLite 는 스레드 검사 해제, 메모리 DB 는 단일 커넥션 공유
engine_options = {"pool_pre_ping": True}
if DB_URL.startswith("sqlite"):
    engine_options["connect_args"] = {"check_same_thread": False}
    if DB_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_options["poolclass"] = StaticPool

# SQLAlchemy 엔진
engine = create_engine(DB_URL, **engine_options)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# DB 세션 의존성 (요청당 세션 1개)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
