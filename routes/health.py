from fastapi import APIRouter

from utils import now_iso_sao_paulo

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
def health():
    return {"status": "OK", "message": "Desenrola Direito API funcionando!", "time": now_iso_sao_paulo()}
