import logging
from contextlib import asynccontextmanager
from typing import Any, List

from fastapi import FastAPI
from pydantic import BaseModel

from src.config import settings
from src.utils.password_strength import analyze_password

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"🚀 {settings.APP_NAME} v{settings.APP_VERSION} starting")
    yield
    logger.info(f"🛑 {settings.APP_NAME} shutting down")

app = FastAPI(
    title="SecureApp Password Checker",
    description="Real-time password strength feedback for the SecureApp signup page",
    version=settings.APP_VERSION,
    lifespan=lifespan
)


class PasswordRequest(BaseModel):
    # Any JSON value is accepted; anything but a non-empty string rates "weak"
    password: Any


class PasswordResponse(BaseModel):
    score: int
    strength: str
    feedback: List[str]


@app.get("/")
async def root():
    return {"message": "Password Checker Service is Running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


@app.post('/check-password', response_model=PasswordResponse)
def check_password(request: PasswordRequest):
    report = analyze_password(request.password)
    logger.info(f"Password rated {report.strength} (score {report.score})")
    return PasswordResponse(score=report.score, strength=report.strength, feedback=report.feedback)
