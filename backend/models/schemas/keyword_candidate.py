"""Ranked keyword candidate produced by the keyword extractor."""

from pydantic import BaseModel


class KeywordCandidate(BaseModel):
    term: str  # lowercase token, length > 2, never a stop word
    frequency: int
    relevance: float = 1.0  # 2.0 for domain keywords

    @property
    def weight(self) -> float:
        """Ranking key: frequency boosted by domain relevance."""
        return self.frequency * self.relevance
