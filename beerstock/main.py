# beerstock/main.py
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beerstock.core.config import settings
from beerstock.core.database import Base, engine
from beerstock.core.logger import configure_logging, get_logger

from beerstock.routers.beer_router import router as beer_router
from beerstock.routers.log_router import router as log_router

# 모델 등록 (create_all 대상)
import beerstock.models  # noqa: F401

configure_logging()
logger = get_logger(__name__)

app = FastAPI(title="Beer Stock API", debug=settings.DEBUG)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(beer_router)
app.include_router(log_router)


# --------------------------------
# 서버 이벤트
# --------------------------------
@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("DB tables created")
    logger.info("Server starting", port=settings.SERVER_PORT)


@app.on_event("shutdown")
def on_shutdown():
    engine.dispose()
    logger.info("Server stopped")


def run():
    uvicorn.run("beerstock.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
