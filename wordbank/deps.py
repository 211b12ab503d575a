"""FastAPI dependencies that hand the per-app stores to the routes."""

from fastapi import Request

from wordbank.codes import CodeRegistry
from wordbank.store import WordStore


def get_word_store(request: Request) -> WordStore:
    return request.app.state.word_store


def get_code_registry(request: Request) -> CodeRegistry:
    return request.app.state.code_registry
