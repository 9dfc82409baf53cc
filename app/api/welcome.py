"""Greeting endpoint; echoes the caller's name only after HTML-escaping it."""

from typing import Annotated

from fastapi import APIRouter, Query

from app.core.security import escape_html
from app.schemas.users import WelcomeResponse

router = APIRouter()

DEFAULT_VISITOR_NAME = "Visiteur"


@router.get("/welcome", response_model=WelcomeResponse)
def get_welcome(name: Annotated[str | None, Query()] = None) -> WelcomeResponse:
    display_name = escape_html(name) if name else DEFAULT_VISITOR_NAME
    return WelcomeResponse(message=f"Bienvenue sur l'API, {display_name} !")
