from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# ✅ middlewares
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ routers
from routers import auth, subjects, assessments, grades, todos

# ✅ tables
import models
from database.db import Base, engine

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS (front-end dev servers)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ latency header (X-Latency-Ms) + access log
app.add_middleware(TimingMiddleware)

# ✅ global error handlers (consistent JSON error format)
add_error_handlers(app)

# ✅ routers under the API prefix
app.include_router(auth.router,        prefix=settings.API_PREFIX)
app.include_router(subjects.router,    prefix=settings.API_PREFIX)
app.include_router(assessments.router, prefix=settings.API_PREFIX)
app.include_router(grades.router,      prefix=settings.API_PREFIX)
app.include_router(todos.router,       prefix=settings.API_PREFIX)


@app.on_event("startup")
def _create_tables():
    Base.metadata.create_all(bind=engine)


# ✅ health check
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running"}


@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} v{settings.APP_VERSION}"}
