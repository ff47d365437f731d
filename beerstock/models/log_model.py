import enum

from sqlalchemy import Column, String, Integer, BigInteger, DateTime, Enum
from beerstock.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함


# 재고 작업 종류
class StockAction(str, enum.Enum):
    CREATE = "CREATE"
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
    DELETE = "DELETE"


class StockLog(Base):

    __tablename__ = "stock_log"  # DB 테이블명 지정

    # 고유 ID, 자동 증가
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 정보 (삭제 후에도 남도록 FK 없음)
    beer_id = Column(BigInteger, nullable=False, index=True)
    beer_name = Column(String(200), nullable=False)

    # 작업 관련 정보
    action = Column(Enum(StockAction, name="stock_action"), nullable=False)
    amount = Column(Integer, nullable=False)      # 적용된 수량
    quantity = Column(Integer, nullable=False)    # 작업 후 재고

    # 이벤트 발생 시간
    timestamp = Column(DateTime(timezone=True), nullable=False)
