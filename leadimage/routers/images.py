# leadimage/routers/images.py
# Responsibility: Handles lead image API endpoints. Validates input and formats output.

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from leadimage.document.article import BaseParser, PageParser
from leadimage.selection.image_selector import ImageSelector

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/images",
    tags=["Images"]
)

# --- Pydantic Models ---
class PageRequest(BaseModel):
    url: str = ""
    html: str = Field(..., min_length=1, description="Raw HTML of the article page")

class LeadImageResponse(BaseModel):
    url: str
    lead_image: Optional[str] = None
    source: Optional[str] = None

class CandidatesResponse(BaseModel):
    url: str
    social: str
    page: str

# --- Dependencies ---
def get_parser() -> BaseParser:
    return PageParser

def get_selector() -> ImageSelector:
    return ImageSelector()

# --- Endpoints ---
@router.post("/lead", response_model=LeadImageResponse)
def lead_image_endpoint(
    req: PageRequest,
    parser: BaseParser = Depends(get_parser),
    selector: ImageSelector = Depends(get_selector)
):
    """
    Parses the submitted page and returns its lead image, social tags first.
    """
    try:
        article = parser.parse(req.url, req.html)
        lead = selector.select_lead_image(article)
    except Exception:
        logger.exception("Lead image selection failed for %s", req.url)
        raise HTTPException(status_code=500, detail="Internal server error during image selection")

    return LeadImageResponse(url=req.url, lead_image=lead.url, source=lead.source)

@router.post("/candidates", response_model=CandidatesResponse)
def candidates_endpoint(
    req: PageRequest,
    parser: BaseParser = Depends(get_parser),
    selector: ImageSelector = Depends(get_selector)
):
    """
    Returns what each resolver picks on its own ("" when it finds nothing).
    """
    try:
        article = parser.parse(req.url, req.html)
        answers = selector.candidates(article)
    except Exception:
        logger.exception("Resolver run failed for %s", req.url)
        raise HTTPException(status_code=500, detail="Internal server error during image selection")

    return CandidatesResponse(url=req.url, social=answers["social"], page=answers["page"])
