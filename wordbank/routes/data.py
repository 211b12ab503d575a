"""
/data and /reset -- Whole-bank operations.
"""

from fastapi import APIRouter, Depends

from wordbank.deps import get_word_store
from wordbank.models.schemas import ResetResponse
from wordbank.store import WordStore

router = APIRouter(tags=["Words"])


@router.get(
    "/data",
    response_model=dict[str, list[str]],
    summary="Get the whole word bank",
)
async def list_all(store: WordStore = Depends(get_word_store)) -> dict[str, list[str]]:
    return store.list_all()


@router.post(
    "/reset",
    response_model=ResetResponse,
    summary="Restore the default word bank",
    description="Discards every change and restores the built-in default categories.",
)
async def reset(store: WordStore = Depends(get_word_store)) -> ResetResponse:
    return ResetResponse(message="Data reset to defaults", data=store.reset())
