from typing import Any, Literal, Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic_core import PydanticCustomError

_URL_ADAPTER = TypeAdapter(AnyUrl)


class AnalysisRequest(BaseModel):
    """Inbound body of POST /api/analyze. Extra keys are dropped."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    media_type: Literal["image", "video"] = Field(alias="mediaType")
    url: Optional[str] = None
    base64: Optional[str] = Field(None, min_length=1)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: Optional[str]) -> Optional[str]:
        # Validated as a URL but forwarded exactly as the caller wrote it
        if value is not None:
            try:
                _URL_ADAPTER.validate_python(value)
            except ValueError:
                raise PydanticCustomError("url_parsing", "URL inválida")
        return value

    def to_detector_payload(self) -> dict:
        body = {"media_type": self.media_type, "url": self.url, "base64": self.base64}
        return {k: v for k, v in body.items() if v is not None}


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    verdict: str
    ai_percentage: float = Field(alias="aiPercentage")
    threshold: float
    detector_response: Any = Field(alias="detectorResponse")


class HealthResponse(BaseModel):
    ok: bool
    message: str
