from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from digiwallet import __version__
from digiwallet.api import create_api_router
from digiwallet.api.errors import register_error_handlers
from digiwallet.core.config import Settings, get_settings
from digiwallet.core.container import ApplicationContainer, build_container
from digiwallet.core.logging import setup_logging

BASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = BASE_DIR.parent


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or get_settings()
    container = container or build_container(settings)

    static_dir = _resolve_path(settings.static_dir)
    templates = Jinja2Templates(directory=str(_resolve_path(settings.template_dir)))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.logging.level, settings.logging.format)
        await container.init_infrastructure()
        yield
        await container.shutdown()

    app = FastAPI(
        title=settings.project_name,
        description="Digital wallet service: users, wallets, cards and transactions",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.container = container
    # appended as ?v=xxx to static asset URLs for cache busting
    app.state.static_version = __version__

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
        max_age=settings.cors.max_age,
    )

    register_error_handlers(app)

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def homepage(request: Request):
        return templates.TemplateResponse(
            request,
            "index.html",
            {"static_version": app.state.static_version, "api_prefix": settings.api_prefix},
        )

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "digiwallet.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
