from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from echobot.routers import chat
from echobot.core.config import get_settings
from echobot.core.logging import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="EchoBot Backend", version="1.0.0")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include Routers
    app.include_router(chat.router, prefix=settings.API_PREFIX, tags=["Chat"])

    @app.get("/")
    def read_root():
        return {"message": "Welcome to EchoBot Backend API"}

    return app


app = create_app()
