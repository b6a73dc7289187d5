from typing import Optional
from pydantic import BaseModel, ConfigDict

class LinkPreview(BaseModel):
    """Open Graph card data for a URL, as stored on posts"""
    title: str = ""
    description: str = ""
    image: str = ""
    site: str = ""
    url: Optional[str] = None

    model_config = ConfigDict(extra="ignore")
