from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.config.settings import Settings
from app.documents.exceptions import DocumentParseError, UnsupportedFileType
from app.logging.logger import Log
from app.proforma.extractor import ProFormaExtractor, build_pro_forma_extractor


async def _unsupported_file_type(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Rejected upload: {exc}", path=request.url.path)
    return JSONResponse(status_code=415, content={"error": "Unsupported file type"})


async def _document_parse_error(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"Error processing file: {exc}", path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "Failed to process file"})


def create_app(
    settings: Settings | None = None,
    extractor: ProFormaExtractor | None = None,
) -> FastAPI:
    """Build the FastAPI application with its extractor and error mapping."""
    settings = settings or Settings()
    app = FastAPI(
        title="Candidates Panel API",
        description="Pro-forma field extraction for the candidates panel admin app",
        version="1.0.0",
    )
    app.state.extractor = extractor or build_pro_forma_extractor(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(UnsupportedFileType, _unsupported_file_type)
    app.add_exception_handler(DocumentParseError, _document_parse_error)
    app.include_router(router)
    return app
