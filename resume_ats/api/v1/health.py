from fastapi import APIRouter

from resume_ats.taxonomy import get_default_taxonomy_provider

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "taxonomy_version": get_default_taxonomy_provider().version}
