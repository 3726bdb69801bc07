import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from eduassess.core.config import settings
from eduassess.core.db import engine, Base
from eduassess.core.logging import configure_logging
from eduassess.api.auth import router as auth_router
from eduassess.api.assessments import router as assessments_router
from eduassess.api.results import router as results_router
from eduassess.api.admin import router as admin_router
import eduassess.models  # noqa: F401  registers tables on Base.metadata

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="EduAssess API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create tables on startup
Base.metadata.create_all(bind=engine)

app.include_router(auth_router)
app.include_router(assessments_router)
app.include_router(results_router)
app.include_router(admin_router)

@app.exception_handler(SQLAlchemyError)
async def store_failure(request: Request, exc: SQLAlchemyError):
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Server error"})

@app.get("/api/health")
def health():
    return {"message": "EDUASSESS API is running"}
