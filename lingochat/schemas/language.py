"""Target language schemas."""

from pydantic import BaseModel


class LanguageResponse(BaseModel):
    """One selectable translation target."""

    code: str
    name: str
