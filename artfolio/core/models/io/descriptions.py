"""
Schemas for the AI description helper.
"""

from pydantic import BaseModel, Field


class DescribeArtworkRequest(BaseModel):
    photo_data_uri: str = Field(
        description=(
            "A photo of an artwork, as a data URI that must include a MIME type and use Base64 encoding. "
            "Expected format: 'data:<mimetype>;base64,<encoded_data>'."
        )
    )


class ArtworkDescription(BaseModel):
    """Structured output requested from the model."""

    description: str = Field(
        description="An artistic and engaging description of the artwork provided, in 2-3 sentences."
    )


class DescribeArtworkResponse(BaseModel):
    description: str
