"""Glossary generation endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Depends

from ..schemas.glossary import GenerateRequest, MoreTermsRequest, MoreTermsResponse
from ..models.glossary import Glossary
from ..exceptions import GlossaryServiceError
from ..workflows.generate import GlossaryGenerator
from ..utils.helpers import utcnow
from ..api.dependencies import router_limiter, get_glossary_generator

logger = logging.getLogger("glossary_api.routers.glossary")

router = APIRouter(prefix="/api", tags=["Glossary"])


@router.post(
    "/generate",
    response_model=Glossary,
    response_model_exclude_none=True,
    dependencies=[Depends(router_limiter)],
    responses={
        200: {
            "description": "A freshly generated glossary.",
            "content": {
                "application/json": {
                    "example": {
                        "id": "3f0b6f0e-8a47-4f55-9d39-0d1f0e8c2a11",
                        "title": "Computer Science",
                        "description": "Core ideas behind recursive problem solving.",
                        "seedWord": "Recursion",
                        "detectedLanguage": "English",
                        "terms": [
                            {
                                "term": "Recursion",
                                "definition": "A technique where a function calls itself on smaller inputs. It expresses divide-and-conquer algorithms concisely.",
                                "importance": 10,
                                "relatedTerms": ["Base Case", "Call Stack"]
                            }
                        ],
                        "createdAt": "2026-02-07T10:00:00Z",
                        "updatedAt": "2026-02-07T10:00:00Z"
                    }
                }
            }
        },
        400: {"description": "seedWord missing or not a string."},
        500: {"description": "Model API error or unparseable model reply."}
    }
)
async def generate_glossary(
    request: GenerateRequest,
    generator: GlossaryGenerator = Depends(get_glossary_generator),
):
    """
    Generate a glossary around a seed word.

    The seed word becomes the first term with importance 10. Content is written
    in the language of the seed word.
    """
    try:
        return await generator.generate(request.seed_word, request.title)
    except GlossaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception("Error generating glossary")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post(
    "/glossary/terms",
    response_model=MoreTermsResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(router_limiter)],
)
async def add_glossary_terms(
    request: MoreTermsRequest,
    generator: GlossaryGenerator = Depends(get_glossary_generator),
):
    """
    Grow an existing glossary with more complementary terms.

    Returns the new terms alongside the glossary with those terms appended.
    Terms whose names already exist are never returned.
    """
    try:
        new_terms = await generator.add_terms(request.glossary)
    except GlossaryServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception("Error adding glossary terms")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    glossary = request.glossary.model_copy(update={
        "terms": [*request.glossary.terms, *new_terms],
        "updated_at": utcnow(),
    })
    return MoreTermsResponse(terms=new_terms, glossary=glossary)
