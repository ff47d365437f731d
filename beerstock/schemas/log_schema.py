from pydantic import BaseModel, ConfigDict
from datetime import datetime

from beerstock.models.log_model import StockAction


# 재고 로그 응답 스키마
class StockLogResponse(BaseModel):
    id: int
    beer_id: int
    beer_name: str
    action: StockAction
    amount: int       # 적용된 수량
    quantity: int     # 작업 후 재고
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)
