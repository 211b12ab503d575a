"""
/hobby/{type} -- Read and edit one category's word list.

GET     list the words
POST    add a word (409 if it duplicates an existing one)
DELETE  remove a word
PUT     replace a word in place

Duplicate checks ignore case and whitespace; words are stored as sent.
"""

from fastapi import APIRouter, Depends

from wordbank.deps import get_word_store
from wordbank.models.schemas import (
    ErrorResponse,
    HobbyWords,
    UpdateWordRequest,
    WordAdded,
    WordDeleted,
    WordRequest,
    WordUpdated,
)
from wordbank.store import WordStore
from wordbank.validation import require_text

router = APIRouter(tags=["Words"])


@router.get(
    "/hobby/{hobby_type}",
    response_model=HobbyWords,
    summary="List words in a category",
    responses={404: {"model": ErrorResponse}},
)
async def get_hobby(hobby_type: str, store: WordStore = Depends(get_word_store)) -> HobbyWords:
    return HobbyWords(hobby=hobby_type, words=store.get(hobby_type))


@router.post(
    "/hobby/{hobby_type}",
    response_model=WordAdded,
    summary="Add a word",
    description="Creates the category if needed. Rejects words that match an existing one "
                "ignoring case and whitespace.",
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def add_word(
    hobby_type: str,
    payload: WordRequest | None = None,
    store: WordStore = Depends(get_word_store),
) -> WordAdded:
    word = require_text("word", payload.word if payload else None)
    words = store.insert(hobby_type, word)
    return WordAdded(message="Word added", hobby=hobby_type, words=words)


@router.delete(
    "/hobby/{hobby_type}",
    response_model=WordDeleted,
    summary="Delete a word",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_word(
    hobby_type: str,
    payload: WordRequest | None = None,
    store: WordStore = Depends(get_word_store),
) -> WordDeleted:
    word = require_text("word", payload.word if payload else None)
    deleted, words = store.remove(hobby_type, word)
    return WordDeleted(message="Word deleted", deleted_word=deleted, hobby=hobby_type, words=words)


@router.put(
    "/hobby/{hobby_type}",
    response_model=WordUpdated,
    summary="Replace a word in place",
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def update_word(
    hobby_type: str,
    payload: UpdateWordRequest | None = None,
    store: WordStore = Depends(get_word_store),
) -> WordUpdated:
    payload = payload or UpdateWordRequest()
    old_word = require_text("oldWord", payload.old_word)
    new_word = require_text("newWord", payload.new_word)

    words = store.update(hobby_type, old_word, new_word)
    return WordUpdated(
        message="Word updated",
        old_word=old_word,
        new_word=new_word,
        hobby=hobby_type,
        words=words,
    )
