from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from config import get_settings
from core.session_manager import SessionManager
from schemas import HealthResponse
from api import sessions, players, doubles

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: 設定 logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    yield
    # Shutdown: 所有 Session 都只存在記憶體，直接清掉
    SessionManager.reset()


app = FastAPI(
    title=settings.app_title,
    description="Randomly pair a roster of players into doubles teams",
    version="1.0.0",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(sessions.router)
app.include_router(players.router)
app.include_router(doubles.router)


@app.get("/")
def root():
    return {"message": "Doubles Draw API", "status": "ok"}


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="healthy", sessions=SessionManager.session_count())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
