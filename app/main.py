import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.database import build_engine, build_session_factory, create_tables
from app.dependencies import authenticate_user
from app.routers.auth import router as auth_router
from app.routers.tasks import router as tasks_router
from app.store import UserStore
from app.utils.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = build_engine(settings.database_url)
    await create_tables(engine)
    app.state.store = UserStore(build_session_factory(engine))
    logger.info("User store ready")
    yield
    await engine.dispose()


app = FastAPI(
    title="Auth API",
    description="Signup, signin and token-gated tasks",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(tasks_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Start"


@app.get("/home", response_class=PlainTextResponse, dependencies=[Depends(authenticate_user)])
async def home():
    return "Home"
