import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from routers.admin import router as admin_router

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.numbers import router as numbers_router
from routers.questions import router as questions_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("arabic-quiz")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = FastAPI(title="Arabic Number Games – Quiz API")

# Allow calls from the web client dev server and any configured production origins
_extra_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        *_extra_origins,
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*", "x-api-key", "x-admin-token"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /games, /questions/generate
app.include_router(marking_router)  # /check, /similarity, /match
app.include_router(numbers_router)  # /numbers/...
app.include_router(sessions_router)  # /sessions/...
app.include_router(admin_router)  # /admin/...
app.include_router(health_router)  # /health/...
