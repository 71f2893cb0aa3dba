from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check that the CV sync service is up.")
async def health_check():
    return {"status": "healthy"}
