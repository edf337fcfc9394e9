import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from homedecor.shared.config import settings
from homedecor.shared.config.database import AsyncSessionLocal, Base, engine
from homedecor.shared.observability import setup_observability
from homedecor.shared.security import limiter

# IMPORTANT: import models so they register with Base
from homedecor.services.auth_service import models as auth_models  # noqa: F401
from homedecor.services.category_service import models as category_models  # noqa: F401
from homedecor.services.product_service import models as product_models  # noqa: F401
from homedecor.services.cart_service import models as cart_models  # noqa: F401
from homedecor.services.order_service import models as order_models  # noqa: F401
from homedecor.services.content_service import models as content_models  # noqa: F401
from homedecor.services.contact_service import models as contact_models  # noqa: F401

from homedecor.services.admin_service.router import router as admin_router
from homedecor.services.auth_service.router import router as auth_router
from homedecor.services.auth_service.service import AuthService
from homedecor.services.cart_service.router import router as cart_router
from homedecor.services.category_service.router import router as category_router
from homedecor.services.contact_service.router import public_router as contact_public_router
from homedecor.services.contact_service.router import router as contact_admin_router
from homedecor.services.content_service.router import router as content_router
from homedecor.services.content_service.router import settings_router
from homedecor.services.order_service.router import router as order_router
from homedecor.services.product_service.router import router as product_router
from homedecor.services.upload_service.router import router as upload_router

logger = structlog.get_logger(__name__)

app = FastAPI(title="Home Decor Storefront", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(app, settings.SERVICE_NAME)

# --- SECURITY SETUP ---
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth_router)
app.include_router(product_router)
app.include_router(category_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(settings_router)
app.include_router(content_router)
app.include_router(contact_public_router)
app.include_router(contact_admin_router)
app.include_router(admin_router)
app.include_router(upload_router)


@app.get("/health")
async def health():
    return {"service": settings.SERVICE_NAME, "status": "running"}


@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        async with AsyncSessionLocal() as db:
            await AuthService.ensure_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME)
