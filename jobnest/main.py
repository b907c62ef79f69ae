import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from jobnest.core import config
from jobnest.core.errors import register_error_handlers
from jobnest.core.logging_config import setup_logging
from jobnest.services.storage import BlobStore, LocalBlobStore
from jobnest.services.payment_service import PaymentGateway, StripeGateway

# ✅ Import All API Routes
from jobnest.api.routes import auth, jobs, employer, seeker, notifications, payment, admin, system

logger = logging.getLogger(__name__)


def create_app(
    blob_store: Optional[BlobStore] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """
    Build the API.

    The blob store and payment gateway are created once here and shared by
    every request through app.state; tests pass their own.
    """
    setup_logging(config.LOG_LEVEL, config.LOG_DIR)

    if config.IS_PRODUCTION and config.SECRET_KEY == "change-me-in-production":
        logger.warning("SECRET_KEY is the development default - set SECRET_KEY in production")

    if config.RUN_MIGRATIONS:
        from jobnest.db.migrate import run_migrations
        run_migrations()

    # ============================================
    # ✅ FASTAPI APP INIT
    # ============================================

    app = FastAPI(title="JobNest API", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_error_handlers(app)

    app.state.blob_store = blob_store or LocalBlobStore(config.UPLOAD_DIR, config.UPLOAD_BASE_URL)
    app.state.payment_gateway = payment_gateway or StripeGateway(
        config.STRIPE_SECRET_KEY,
        config.PAYMENT_SIGNING_SECRET,
    )

    # ============================================
    # ✅ REGISTER ALL ROUTERS
    # ============================================

    app.include_router(auth.router)
    app.include_router(jobs.router)
    app.include_router(employer.router)
    app.include_router(seeker.router)
    app.include_router(notifications.router)
    app.include_router(payment.router)
    app.include_router(admin.router)
    app.include_router(system.router)
    app.mount(config.UPLOAD_BASE_URL, StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name="uploads")

    @app.get("/")
    def root():
        return {"status": "JobNest API running"}

    logger.info(f"Application created: environment={config.ENVIRONMENT}")
    return app


app = create_app()
