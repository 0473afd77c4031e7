from fastapi import FastAPI

from app.api.errors import invalid_input_handler, not_found_handler
from app.api.routes import router as api_router
from app.core.config import get_settings, load_seed_data
from app.core.errors import InvalidInputError, NotFoundError
from app.core.logging import configure_logging
from app.services.dashboard import build_dashboard


def create_app() -> FastAPI:
    """애플리케이션을 생성하고 FastAPI를 설정"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(title="Doctor Desk", version=settings.version)
    app.state.dashboard = build_dashboard(load_seed_data(), settings)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.include_router(api_router)

    return app


app = create_app()
