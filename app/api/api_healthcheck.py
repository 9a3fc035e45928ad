from fastapi import APIRouter

router = APIRouter()


@router.get('')
def get():
    return {"status": "OK", "message": "API is running"}
