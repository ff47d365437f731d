from beerstock.models.beer_model import Beer, BeerType
from beerstock.models.log_model import StockLog, StockAction

__all__ = ["Beer", "BeerType", "StockLog", "StockAction"]
