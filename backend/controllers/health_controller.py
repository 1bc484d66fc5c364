from fastapi import APIRouter

router = APIRouter(tags = ["Health"])

@router.get("/health")
def health_endpoint():
    return {"status": "ok"}
