# beerstock/crud/beer_crud.py
from sqlalchemy.orm import Session
from beerstock.models.beer_model import Beer


# READ-ALL 전체 맥주 조회 (등록 순)
def get_beers(db: Session):
    return db.query(Beer).order_by(Beer.id).all()


# READ 단일 맥주 조회 (ID 기준)
def get_beer_by_id(db: Session, beer_id: int, for_update: bool = False):
    """
    for_update=True 이면 SELECT ... FOR UPDATE 로 행을 잠금
    (같은 ID 에 대한 동시 증감을 커밋 시점까지 직렬화)
    """
    query = db.query(Beer).filter(Beer.id == beer_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


# READ 단일 맥주 조회 (이름 기준, 대소문자 구분)
def get_beer_by_name(db: Session, name: str):
    return db.query(Beer).filter(Beer.name == name).first()


# SAVE id 없으면 추가, 있으면 전체 교체 (커밋은 호출 측에서)
def save_beer(db: Session, beer: Beer):
    if beer.id is None:
        db.add(beer)
    else:
        beer = db.merge(beer)
    db.flush()
    return beer


# DELETE 없으면 None 반환 (커밋은 호출 측에서)
def delete_beer(db: Session, beer_id: int):
    db_beer = db.query(Beer).filter(Beer.id == beer_id).first()
    if not db_beer:
        return None

    db.delete(db_beer)
    db.flush()
    return db_beer
