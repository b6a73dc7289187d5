from fastapi import APIRouter, Depends, HTTPException, Query, status
import logging

from ringconnect.core.exceptions import InvalidOperationError
from ringconnect.modules.link_preview.schemas import LinkPreview
from ringconnect.modules.link_preview.service import (
    LinkPreviewFetchError, LinkPreviewService, get_link_preview_service
)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=LinkPreview)
def read_link_preview(
    url: str = Query(..., description="Page to preview"),
    service: LinkPreviewService = Depends(get_link_preview_service),
) -> LinkPreview:
    """Open Graph card data for an arbitrary URL"""
    try:
        return service.fetch(url)
    except InvalidOperationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except LinkPreviewFetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
