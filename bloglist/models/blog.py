from pydantic import BaseModel
from typing import Optional


class Blog(BaseModel):
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0

    def to_document(self) -> dict:
        # absent authors stay absent in the stored document
        return self.model_dump(exclude_none=True)
