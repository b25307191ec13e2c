import logging

from fastapi import APIRouter, Depends, HTTPException

from config import settings
from models import GenerateRequest, GenerateResponse
from utils.clients.anthropic import (
    EMPTY_RESPONSE,
    MISSING_CREDENTIAL,
    TextGenerator,
    UpstreamError,
    get_text_generator,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter()


@router.get("/")
async def root():
    return {
        "service": "Viewlytics",
        "status": "running",
        "endpoints": {"generate": "/api/generate (POST)"},
    }


@router.post("/api/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    """
    Relays a prompt to the upstream model and returns its text verbatim.

    The upstream credential stays on the server. One outbound call per
    request, no retries.
    """
    try:
        text = await generator.generate(request.prompt)
    except UpstreamError as e:
        logger.error(f"❌ Upstream failure ({e.kind}): {e.message}")
        if e.kind == MISSING_CREDENTIAL:
            raise HTTPException(status_code=503, detail=e.message)
        if e.kind == EMPTY_RESPONSE:
            raise HTTPException(status_code=502, detail=e.message)
        raise HTTPException(
            status_code=502, detail=f"Upstream provider request failed: {e.message}"
        )
    except Exception as e:
        logger.exception(f"❌ Unexpected generation failure: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Generation failed: {str(e)}")

    return GenerateResponse(text=text)


@router.get("/health")
async def health_check():
    return {"status": "healthy"}


@router.get("/status/detailed")
async def detailed_status_check():
    """
    Reports whether the upstream provider is usable.

    The credential value itself is never returned.
    """
    status_info = {
        "api": "healthy",
        "anthropic_api": "configured" if settings.has_credential else "missing",
        "model": settings.ANTHROPIC_MODEL,
    }

    if status_info["anthropic_api"] == "missing":
        status_info["overall_status"] = "degraded"
    else:
        status_info["overall_status"] = "healthy"

    return status_info
