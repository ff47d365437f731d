from datetime import datetime, timezone

from sqlalchemy.orm import Session
from beerstock.models.beer_model import Beer
from beerstock.models.log_model import StockLog, StockAction


# READ-ALL 전체 로그 조회 (최신 순)
def get_logs(db: Session, skip: int = 0, limit: int = 100):
    return (
        db.query(StockLog)
        .order_by(StockLog.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


# READ 특정 맥주의 로그 조회 (최신 순)
def get_logs_by_beer(db: Session, beer_id: int):
    return (
        db.query(StockLog)
        .filter(StockLog.beer_id == beer_id)
        .order_by(StockLog.id.desc())
        .all()
    )


# CREATE 새로운 로그 추가 (재고 변경과 같은 트랜잭션에서 커밋)
def create_log(db: Session, beer: Beer, action: StockAction, amount: int):
    new_log = StockLog(
        beer_id=beer.id,
        beer_name=beer.name,
        action=action,
        amount=amount,
        quantity=0 if action == StockAction.DELETE else beer.quantity,
        timestamp=datetime.now(timezone.utc),
    )
    db.add(new_log)
    return new_log
