from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.documents.models import RawDocument
from app.proforma.extractor import ProFormaExtractor

router = APIRouter()


def get_extractor(request: Request) -> ProFormaExtractor:
    return request.app.state.extractor


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.post("/api/extract-pro-forma-data")
def extract_pro_forma_data(
    pro_forma: UploadFile = File(..., alias="proForma"),
    extractor: ProFormaExtractor = Depends(get_extractor),
) -> dict[str, str]:
    """Scrape candidate fields from an uploaded PDF or Word pro-forma."""
    document = RawDocument(
        content=pro_forma.file.read(),
        content_type=pro_forma.content_type or "",
        filename=pro_forma.filename or "",
    )
    result = extractor.extract(document)
    return result.fields.to_dict()
