"""Homestay property import – FastAPI application."""
# Load .env before any app code that might read config
from dotenv import load_dotenv
from pathlib import Path
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homestay.config import get_settings
from homestay.database import Base, SessionLocal, engine
# Import models so Base.metadata has all tables before create_all (schema source of truth)
import homestay.models  # noqa: F401
from homestay.routers import catalog, properties
from homestay.seed import seed_catalog

settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(properties.router)
app.include_router(catalog.router)


@app.on_event("startup")
def startup():
    try:
        Base.metadata.create_all(bind=engine)
        if settings.seed_catalog_on_startup:
            db = SessionLocal()
            try:
                seed_catalog(db)
            finally:
                db.close()
    except Exception as e:
        logging.getLogger("uvicorn.error").warning("Database startup failed (tables/seed skipped). Check DATABASE_URL. Error: %s", e)


@app.get("/")
def root():
    return {"app": settings.app_name, "status": "ok"}


@app.get("/health")
def health():
    return {"status": "healthy"}
