from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from beerstock.core.database import get_db
from beerstock.crud import log_crud
from beerstock.schemas.log_schema import StockLogResponse
from beerstock.services import beer_mapper

# 재고 로그 관련 API 라우터
router = APIRouter(prefix="/api/v1/logs", tags=["Logs"])


# 전체 로그 조회 (최신 순)
@router.get("", response_model=List[StockLogResponse])
def read_logs(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return [beer_mapper.to_log_response(log) for log in log_crud.get_logs(db, skip, limit)]


# 특정 맥주의 로그 조회
@router.get("/beer/{beer_id}", response_model=List[StockLogResponse])
def read_beer_logs(beer_id: int, db: Session = Depends(get_db)):
    return [beer_mapper.to_log_response(log) for log in log_crud.get_logs_by_beer(db, beer_id)]
