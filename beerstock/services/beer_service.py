from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from beerstock.core.logger import get_logger
from beerstock.crud import beer_crud, log_crud
from beerstock.models.log_model import StockAction
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse
from beerstock.services import beer_mapper
from beerstock.services.stock_result import (
    AlreadyExists,
    NotFound,
    StockBelowZero,
    StockError,
    StockExceeded,
    StockResult,
)

logger = get_logger(__name__)


class BeerService:
    """
    맥주 재고 관련 비즈니스 로직을 관리하는 서비스 클래스

    - 등록 시 이름 중복 확인
    - 조회/증감/삭제 시 존재 여부 확인
    - 증감 시 0 <= quantity <= max 보장 (위반 시 저장하지 않음)

    규칙 위반은 StockResult.fail 로 반환하고, DB 오류는 그대로 전파한다.
    """

    def __init__(self, db: Session):
        self.db = db

    # CREATE 맥주 등록
    def create_beer(self, data: BeerCreate) -> StockResult[BeerResponse]:
        if beer_crud.get_beer_by_name(self.db, data.name):
            return self._fail(AlreadyExists(data.name))

        beer = beer_mapper.to_model(data)
        try:
            beer = beer_crud.save_beer(self.db, beer)
        except IntegrityError:
            self.db.rollback()
            # 중복 확인 이후 같은 이름이 먼저 저장된 경우만 AlreadyExists, 그 외 제약 위반은 전파
            if beer_crud.get_beer_by_name(self.db, data.name) is None:
                raise
            return self._fail(AlreadyExists(data.name))

        log_crud.create_log(self.db, beer, StockAction.CREATE, beer.quantity)
        self._commit()
        self.db.refresh(beer)

        logger.info("Beer registered", beer_id=beer.id, name=beer.name, quantity=beer.quantity, max=beer.max)
        return StockResult.success(beer_mapper.to_response(beer))

    # READ 이름으로 조회
    def find_by_name(self, name: str) -> StockResult[BeerResponse]:
        beer = beer_crud.get_beer_by_name(self.db, name)
        if not beer:
            return self._fail(NotFound(name))
        return StockResult.success(beer_mapper.to_response(beer))

    # READ 전체 조회
    def list_beers(self) -> List[BeerResponse]:
        return [beer_mapper.to_response(b) for b in beer_crud.get_beers(self.db)]

    # DELETE ID 로 삭제
    def delete_by_id(self, beer_id: int) -> StockResult[None]:
        beer = beer_crud.delete_beer(self.db, beer_id)
        if not beer:
            return self._fail(NotFound(beer_id))

        log_crud.create_log(self.db, beer, StockAction.DELETE, beer.quantity)
        self._commit()

        logger.info("Beer deleted", beer_id=beer_id)
        return StockResult.success()

    # 입고 (재고 증가)
    def increment(self, beer_id: int, amount: int) -> StockResult[BeerResponse]:
        self._check_amount(amount)

        beer = beer_crud.get_beer_by_id(self.db, beer_id, for_update=True)
        if not beer:
            return self._fail(NotFound(beer_id))

        new_quantity = beer.quantity + amount
        if new_quantity > beer.max:
            return self._fail(StockExceeded(beer_id))

        return self._apply(beer, new_quantity, StockAction.INCREMENT, amount)

    # 출고 (재고 감소)
    def decrement(self, beer_id: int, amount: int) -> StockResult[BeerResponse]:
        self._check_amount(amount)

        beer = beer_crud.get_beer_by_id(self.db, beer_id, for_update=True)
        if not beer:
            return self._fail(NotFound(beer_id))

        new_quantity = beer.quantity - amount
        if new_quantity < 0:
            return self._fail(StockBelowZero(beer_id))

        return self._apply(beer, new_quantity, StockAction.DECREMENT, amount)

    # 검증된 수량 저장 + 로그 기록
    def _apply(self, beer, new_quantity: int, action: StockAction, amount: int) -> StockResult[BeerResponse]:
        old_quantity = beer.quantity
        beer.quantity = new_quantity
        beer = beer_crud.save_beer(self.db, beer)

        log_crud.create_log(self.db, beer, action, amount)
        self._commit()
        self.db.refresh(beer)

        logger.info(
            "Beer stock updated",
            beer_id=beer.id,
            action=action.value,
            amount=amount,
            old_quantity=old_quantity,
            new_quantity=beer.quantity,
        )
        return StockResult.success(beer_mapper.to_response(beer))

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    # 실패 시 트랜잭션(행 잠금 포함) 종료
    def _fail(self, error: StockError) -> StockResult:
        self.db.rollback()
        logger.warning("Beer stock operation rejected", kind=error.kind.value, detail=error.message)
        return StockResult.fail(error)

    @staticmethod
    def _check_amount(amount: int):
        if amount < 0:
            raise ValueError(f"amount must not be negative: {amount}")
