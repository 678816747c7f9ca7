"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_manager.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_manager.api.routes import auth, credits, customers, payments, reports
from credit_manager.infrastructure.observability.logging import setup_logging
from credit_manager.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Manager",
        description="Customer credit, repayment and outstanding balance tracking",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(customers.router, prefix="/api", tags=["customers"])
    app.include_router(credits.router, prefix="/api", tags=["credits"])
    app.include_router(payments.router, prefix="/api", tags=["payments"])
    app.include_router(reports.router, prefix="/api", tags=["reports"])

    return app


app = create_app()
