from fastapi import FastAPI

from doc_translator.api.errors import register_exception_handlers
from doc_translator.api.routes import router
from doc_translator.config.settings import Settings
from doc_translator.logging.logger import Log
from doc_translator.workflow.workflow import UploadWorkflow, build_workflow


def create_app(
    settings: Settings | None = None,
    workflow: UploadWorkflow | None = None,
) -> FastAPI:
    """Application factory: settings -> logging -> workflow -> routes."""
    settings = settings or Settings()
    Log.configure(settings.log_level)

    if workflow is None:
        workflow = build_workflow(settings)

    app = FastAPI(title="Doc Translator")
    app.state.settings = settings
    app.state.workflow = workflow
    register_exception_handlers(app)
    app.include_router(router)
    return app
