"""Typed shapes of the tool-call payloads returned by the AI gateway."""
import math
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

FindingType = Literal["bug", "security", "performance", "style"]
Severity = Literal["error", "warning", "info"]
TestCaseType = Literal["unit", "edge", "integration", "boundary"]

Number = Union[int, float]


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_json(self) -> dict:
        # Keys the model omitted (e.g. an optional line) stay omitted.
        return self.model_dump(mode="json", exclude_unset=True)


class Finding(_Payload):
    type: FindingType
    severity: Severity
    line: Optional[Number] = None
    message: str
    suggestion: str


class ReviewResult(_Payload):
    findings: List[Finding]
    summary: str
    score: Number
    rewritten_code: str

    @field_validator("score")
    @classmethod
    def score_must_be_finite(cls, value):
        if not math.isfinite(value):
            raise ValueError("score must be a finite number")
        return value

    @property
    def stored_score(self) -> int:
        """Score as persisted: an integer clamped to 0-100."""
        return max(0, min(100, int(round(self.score))))


class TestCase(_Payload):
    name: str
    description: str
    input: str
    expected_output: str
    type: TestCaseType


class TestSuite(_Payload):
    test_cases: List[TestCase]
