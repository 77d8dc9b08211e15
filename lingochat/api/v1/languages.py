"""Translation target catalog endpoint."""

from fastapi import APIRouter

from lingochat.core.languages import TargetLanguage
from lingochat.schemas.language import LanguageResponse

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=list[LanguageResponse])
async def list_languages() -> list[LanguageResponse]:
    return [
        LanguageResponse(code=language.value, name=language.display_name)
        for language in TargetLanguage
    ]
