import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import settings
from .errors import GameDataError, PartitionNotFound
from .games import season_games, week_rankings
from .models import GameRecord, RankedGame
from .preload import preload
from .repo import GameRepo
from .source import DirectorySource
from .store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/games", tags=["games"])


def create_app(data_dir: str | None = None, preload_on_startup: bool | None = None) -> FastAPI:
    data_dir = data_dir or settings.DATA_DIR
    if preload_on_startup is None:
        preload_on_startup = settings.PRELOAD_ON_STARTUP

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = RecordStore()
        app.state.store = store
        app.state.repo = GameRepo(store, DirectorySource(data_dir))
        if preload_on_startup:
            preload(app.state.repo)
        yield
        store.clear()

    app = FastAPI(title="Game Stats API", lifespan=lifespan)

    # CORS (Render/Netlify friendly)
    # Set CORS_ORIGINS to a comma-separated list, defaults to "*"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(GZipMiddleware)

    app.include_router(router)
    return app


def get_repo(request: Request) -> GameRepo:
    return request.app.state.repo


def _cache_headers(response: Response):
    response.headers["Cache-Control"] = f"public, max-age={settings.CACHE_MAX_AGE}"


@router.get("/{year}/{week}", response_model=list[RankedGame])
def games_for_week(year: int, week: int, response: Response, repo: GameRepo = Depends(get_repo)):
    try:
        ranked = week_rankings(repo, year, week)
    except PartitionNotFound:
        raise HTTPException(status_code=404, detail="No data")
    except GameDataError:
        logger.exception("Failed to load %s week %s", year, week)
        raise HTTPException(status_code=500, detail="Error reading data")

    _cache_headers(response)
    return ranked


@router.get("/{year}", response_model=list[GameRecord], response_model_exclude_none=True)
def games_for_season(year: int, response: Response, repo: GameRepo = Depends(get_repo)):
    games = season_games(repo, year, max_weeks=settings.SEASON_MAX_WEEKS)
    _cache_headers(response)
    return games


app = create_app()


def run():
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Server listening on :%s", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
