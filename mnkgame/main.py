import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mnkgame.config import settings
from mnkgame.ws_handler import router as ws_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="m,n,k-game Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(ws_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/config")
async def config():
    return {
        "default_board_size": settings.default_board_size,
        "default_marks_to_win": settings.default_marks_to_win,
        "max_board_size": settings.max_board_size,
    }
