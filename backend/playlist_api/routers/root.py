"""Greeting endpoint."""
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["root"])


@router.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    return "Hello World!"
