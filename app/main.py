from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.logging_config import setup_logging

# initialize DB tables
from app.core.db import init_db

# routers
from app.api.auth import router as auth_router
from app.api.activities import router as activities_router
from app.api.customers import router as customers_router
from app.api.providers import router as providers_router
from app.api.projects import router as projects_router
from app.api.provider_eligibilities import router as provider_eligibilities_router

setup_logging()

app = FastAPI(title="Mon Appel d'Offre")

# Initialize database tables on startup


@app.on_event("startup")
def on_startup():
    init_db()
    settings.images_dir.mkdir(parents=True, exist_ok=True)

# Allow the frontend dev server to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ],
)

app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["account"])
app.include_router(activities_router, prefix=settings.API_PREFIX, tags=["activities"])
app.include_router(customers_router, prefix=settings.API_PREFIX, tags=["customers"])
app.include_router(providers_router, prefix=settings.API_PREFIX, tags=["providers"])
app.include_router(projects_router, prefix=settings.API_PREFIX, tags=["projects"])
app.include_router(provider_eligibilities_router, prefix=settings.API_PREFIX, tags=["provider-eligibilities"])

# Uploaded project photos are referenced as "content/images/<name>"
app.mount("/content", StaticFiles(directory=settings.web_root / "content", check_dir=False), name="content")


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.UVICORN_HOST, port=settings.UVICORN_PORT, log_level=settings.LOG_LEVEL)
