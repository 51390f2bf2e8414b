import uvicorn

from doc_translator.api.app import create_app
from doc_translator.config.settings import Settings
from doc_translator.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    app = create_app(settings)
    Log.info(f"Server is running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
