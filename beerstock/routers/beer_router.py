from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List

from beerstock.core.database import get_db
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse, QuantityRequest
from beerstock.services.beer_service import BeerService
from beerstock.services.stock_result import StockErrorKind, StockResult

# 맥주 재고 관련 API 라우터
router = APIRouter(prefix="/api/v1/beers", tags=["Beers"])

# 규칙 위반 종류 → HTTP 상태 코드
ERROR_STATUS = {
    StockErrorKind.ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    StockErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StockErrorKind.STOCK_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    StockErrorKind.STOCK_BELOW_ZERO: status.HTTP_400_BAD_REQUEST,
}


# 서비스 의존성
def get_beer_service(db: Session = Depends(get_db)) -> BeerService:
    return BeerService(db)


# 결과 확인 후 실패면 HTTP 오류로 변환
def unwrap(result: StockResult):
    if not result.ok:
        raise HTTPException(status_code=ERROR_STATUS[result.error.kind], detail=result.error.message)
    return result.value


# 전체 맥주 조회
@router.get("", response_model=List[BeerResponse])
def list_beers(service: BeerService = Depends(get_beer_service)):
    return service.list_beers()


# 이름으로 조회
@router.get("/{name}", response_model=BeerResponse)
def find_by_name(name: str, service: BeerService = Depends(get_beer_service)):
    return unwrap(service.find_by_name(name))


# 맥주 등록
@router.post("", response_model=BeerResponse, status_code=status.HTTP_201_CREATED)
def create_beer(beer: BeerCreate, service: BeerService = Depends(get_beer_service)):
    return unwrap(service.create_beer(beer))


# 맥주 삭제
@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_beer(beer_id: int, service: BeerService = Depends(get_beer_service)):
    unwrap(service.delete_by_id(beer_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# 입고
@router.patch("/{beer_id}/increment", response_model=BeerResponse)
def increment(beer_id: int, body: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    return unwrap(service.increment(beer_id, body.quantity))


# 출고
@router.patch("/{beer_id}/decrement", response_model=BeerResponse)
def decrement(beer_id: int, body: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    return unwrap(service.decrement(beer_id, body.quantity))
