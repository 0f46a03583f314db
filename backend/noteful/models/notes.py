from typing import Optional

from pydantic import BaseModel


class NoteIn(BaseModel):
    # title is checked by the route so a blank one answers 400, not 422
    title: Optional[str] = None
    content: Optional[str] = None


class NoteOut(BaseModel):
    id: int
    title: str
    content: str
