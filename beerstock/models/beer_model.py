import enum

from sqlalchemy import Column, String, Integer, BigInteger, Enum
from beerstock.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함


# 맥주 종류
class BeerType(str, enum.Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"

    @property
    def description(self) -> str:
        return _BEER_TYPE_DESCRIPTIONS[self]


_BEER_TYPE_DESCRIPTIONS = {
    BeerType.LAGER: "Lager",
    BeerType.MALZBIER: "Malzbier",
    BeerType.WITBIER: "Witbier",
    BeerType.WEISS: "Weiss",
    BeerType.ALE: "Ale",
    BeerType.IPA: "IPA",
    BeerType.STOUT: "Stout",
}


class Beer(Base):
    __tablename__ = "beer"  # DB 테이블명 지정

    # 고유 ID, 자동 증가 (SQLite 는 INTEGER 여야 rowid 로 증가)
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 맥주 이름
    name = Column(String(200), nullable=False, unique=True)  # 필수, 중복 불가

    # 브랜드
    brand = Column(String(200), nullable=False)

    # 최대 재고 용량 (생성 후 변경 불가)
    max = Column(Integer, nullable=False)

    # 현재 수량 (0 <= quantity <= max)
    quantity = Column(Integer, nullable=False)

    # 종류
    type = Column(Enum(BeerType, name="beer_type"), nullable=False)
