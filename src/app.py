"""Order notification FastAPI application.

Serves the notification mailbox, direct dispatch and the order workflow
over HTTP. Every request runs inside the notifications domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from notifications.config import DispatchSettings
from notifications.domain import notifications
from notifications.services import NotificationServices, build_notification_services
from notifications.utils.logging import configure_logging
from ordering.workflow.sequencer import OrderWorkflowSequencer

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay, as for every Protean domain.
notifications.init()


def build_sequencer(services: NotificationServices, settings: DispatchSettings) -> OrderWorkflowSequencer:
    return OrderWorkflowSequencer(services.engine, review_reminder_delay=settings.review_reminder_delay)


def create_app(
    services: NotificationServices | None = None,
    settings: DispatchSettings | None = None,
) -> FastAPI:
    """Build the application. Tests pass their own services and settings."""
    settings = settings or DispatchSettings.from_env()
    services = services or build_notification_services(settings)
    sequencer = build_sequencer(services, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await sequencer.shutdown()

    app = FastAPI(
        title="Order Notifications API",
        description="Order-event notification dispatch, mailbox and order workflow",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.notification_services = services
    app.state.sequencer = sequencer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the notifications domain context for each request."""
        with notifications.domain_context():
            response = await call_next(request)
        return response

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    from notifications.api.routes import router as notifications_router
    from ordering.api.routes import order_router

    app.include_router(notifications_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domains": {"notifications": {"name": notifications.name}},
                "settings": {
                    "review_reminder_delay": settings.review_reminder_delay,
                    "max_concurrent_dispatches": settings.max_concurrent_dispatches,
                },
            }
        )

    return app


configure_logging()
app = create_app()
