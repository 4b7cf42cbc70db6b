"""FastAPI endpoint for switching the display language."""

from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from localization.locale import LANGUAGE_COOKIE

router = APIRouter(tags=["localization"])


@router.get("/setlanguage/{lang}")
async def set_language(lang: str) -> RedirectResponse:
    response = RedirectResponse(url="/", status_code=302)
    response.set_cookie(LANGUAGE_COOKIE, lang)
    return response
