import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.api.routes import SERVICE_NAME, router
from app.api.uploads import UploadStore
from app.config.settings import Settings
from app.logging.logger import Log
from app.processor.processor import Processor, build_processor


def create_app(
    settings: Settings | None = None,
    processor: Processor | None = None,
) -> FastAPI:
    """Build the FastAPI application: settings -> processor -> routes."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    app = FastAPI(title=SERVICE_NAME)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.processor = processor if processor is not None else build_processor(settings)
    app.state.upload_store = UploadStore(
        settings.upload_dir,
        settings.max_upload_size_bytes,
    )
    register_exception_handlers(app)
    app.include_router(router)

    Log.info(
        f"{SERVICE_NAME} ready (env={settings.app_env}, provider={settings.ai_provider}, "
        f"render_engine={settings.render_engine})"
    )
    return app


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
