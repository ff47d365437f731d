from beerstock.models.beer_model import Beer
from beerstock.models.log_model import StockLog
from beerstock.schemas.beer_schema import BeerCreate, BeerResponse
from beerstock.schemas.log_schema import StockLogResponse

# 등록 시 필수 필드
REQUIRED_FIELDS = ("name", "brand", "type", "max", "quantity")


# 등록 요청 → 엔티티 (필수 필드 및 수량 범위 확인 후 생성)
def to_model(data: BeerCreate) -> Beer:
    fields = data.model_dump()

    missing = [f for f in REQUIRED_FIELDS if fields.get(f) is None]
    if missing:
        raise ValueError(f"missing required fields: {', '.join(missing)}")

    if fields["max"] <= 0:
        raise ValueError("max must be positive")
    if not 0 <= fields["quantity"] <= fields["max"]:
        raise ValueError("quantity must be between 0 and max")

    return Beer(
        name=fields["name"],
        brand=fields["brand"],
        type=fields["type"],
        max=fields["max"],
        quantity=fields["quantity"],
    )


# 엔티티 → 응답
def to_response(beer: Beer) -> BeerResponse:
    return BeerResponse(
        id=beer.id,
        name=beer.name,
        brand=beer.brand,
        max=beer.max,
        quantity=beer.quantity,
        type=beer.type,
    )


# 로그 엔티티 → 응답
def to_log_response(log: StockLog) -> StockLogResponse:
    return StockLogResponse(
        id=log.id,
        beer_id=log.beer_id,
        beer_name=log.beer_name,
        action=log.action,
        amount=log.amount,
        quantity=log.quantity,
        timestamp=log.timestamp,
    )
