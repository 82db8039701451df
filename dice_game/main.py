import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dice_game.config import LOG_LEVEL
from dice_game.database import create_db_and_tables
from dice_game.errors import DiceGameError
from dice_game.middleware import add_cors_middleware, add_logging_middleware
from dice_game.routers import auth_router, users_router, players_router, games_router, rankings_router

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield
    log.info("shutting down")


app = FastAPI(title="Dice Game API", lifespan=lifespan)
app.add_middleware(add_cors_middleware)
app.add_middleware(add_logging_middleware)


@app.exception_handler(DiceGameError)
async def dice_game_error_handler(request: Request, exc: DiceGameError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        errors.setdefault(field, []).append(error["msg"])
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"message": "Validation failed", "errors": errors}),
    )


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(players_router)
app.include_router(games_router)
app.include_router(rankings_router)


@app.get("/")
def root():
    return {"message": "Dice Game API", "status": "running"}


@app.get("/health")
def health_check():
    return {"message": "healthy", "status": "healthy"}
