from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import MAX_INPUT_CHARS
from utils import word_key


class PositioningRequest(BaseModel):
    """Product-positioning inputs collected from the form or the CLI."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(default="", alias="productName")
    target_audience: str = Field(default="", alias="targetAudience")
    pain_points: str = Field(default="", alias="painPoints")
    product_benefit: str = Field(default="", alias="productBenefit")
    competitors: str = ""
    differentiators: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _strip_and_truncate(cls, value):
        if value is None:
            return ""
        return str(value).strip()[:MAX_INPUT_CHARS]

    def validation_error(self) -> Optional[str]:
        # Same order of checks as the form: product name first, then the rest
        if not self.product_name:
            return "Please enter a product name"
        if not all([self.target_audience, self.pain_points, self.product_benefit,
                    self.competitors, self.differentiators]):
            return "Please fill in all fields"
        return None


class PositioningResult(BaseModel):
    positioning: str = ""
    uvp: str = ""
    tagline: str = ""
    insights: str = ""


class WebhookRecord(BaseModel):
    """Payload posted to the automation webhook (keys match the automation scenario)."""

    product_name: str = ""
    target_audience: str = ""
    pain_points: str = ""
    benefit: str = ""
    competitors: str = ""
    differentiators: str = ""
    positioning_statement: str = ""
    uvp: str = ""
    tagline: str = ""

    @classmethod
    def from_outputs(cls, request: PositioningRequest, result: PositioningResult) -> "WebhookRecord":
        return cls(
            product_name=request.product_name,
            target_audience=request.target_audience,
            pain_points=request.pain_points,
            benefit=request.product_benefit,
            competitors=request.competitors,
            differentiators=request.differentiators,
            positioning_statement=result.positioning,
            uvp=result.uvp,
            tagline=result.tagline,
        )

    def is_complete(self) -> bool:
        return bool(self.positioning_statement and self.uvp and self.tagline)


class Candidate(BaseModel):
    """A cleaned tagline phrase; ``display`` keeps the original casing."""

    model_config = ConfigDict(frozen=True)

    display: str

    @property
    def tokens(self) -> List[str]:
        keys = (word_key(w) for w in self.display.split())
        return [k for k in keys if k]

    @property
    def word_count(self) -> int:
        return len(self.display.split())

    @property
    def key(self) -> str:
        return self.display.lower()
