"""Review documents: free-form, stored as posted."""

from pydantic import BaseModel, ConfigDict


class ReviewDocument(BaseModel):
    """Body of POST /reviews."""
    model_config = ConfigDict(extra="allow")
