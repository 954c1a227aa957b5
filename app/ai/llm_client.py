# ABOUTME: LLM client that polishes generated surf summaries for grammar and readability
# ABOUTME: Uses Google Gemini 2.5 Flash-Lite and always falls back to the original text

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

import google.generativeai as genai

from app.debug import debug_log

log = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a professional surf report editor who ensures surf summaries are "
    "grammatically correct and readable while maintaining their authentic surf culture voice."
)

MAX_LENGTH_RATIO = 1.5
MAX_LENGTH_CHARS = 300


@dataclass
class ValidationResult:
    """Outcome of a summary validation attempt"""
    validated_summary: str
    was_validated: bool
    fallback: bool = False
    reason: Optional[str] = None
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Wire format for the /api/validate-summary response."""
        payload = {
            "validatedSummary": self.validated_summary,
            "wasValidated": self.was_validated,
        }
        if self.fallback:
            payload["fallback"] = True
        if self.reason:
            payload["reason"] = self.reason
        payload.update(self.extra)
        return payload


def _emoji_in(text: str) -> set[str]:
    return {ch for ch in text if unicodedata.category(ch) == "So"}


def build_validation_prompt(summary: str, surf_data: Optional[dict]) -> str:
    surf_data = surf_data or {}
    return f"""You are a surf report editor. Review this surf summary for grammar, clarity, and readability.

Original summary: "{summary}"

Surf data context:
- Wave height: {surf_data.get('waveHeight') or 'N/A'}ft
- Wave period: {surf_data.get('wavePeriod') or 'N/A'}s
- Wind speed: {surf_data.get('windSpeed') or 'N/A'}kts
- Wind direction: {surf_data.get('windDirection') or 'N/A'}°

Rules:
1. Keep the same emoji and overall tone/urgency
2. Fix any grammar issues or awkward phrasing
3. Ensure technical surf terms are used correctly
4. Keep it under 200 characters if possible
5. Maintain the surfer slang and personality
6. If the original is already perfect, return it unchanged

Return ONLY the improved summary text, no explanations."""


class LLMClient:
    """Client for polishing surf summaries via LLM API"""

    def __init__(self, api_key: str):
        self.api_key = api_key
        self.model = None
        if api_key:
            genai.configure(api_key=api_key)
            self.model = genai.GenerativeModel(
                "gemini-2.5-flash-lite",
                system_instruction=SYSTEM_INSTRUCTION,
            )

    def validate_summary(self, summary: str, surf_data: Optional[dict] = None) -> ValidationResult:
        """
        Ask the LLM to clean up a summary.

        The original is returned unchanged (fallback=True) when no API key is
        configured, the call fails, the response is empty, the response drops
        the original's emoji, or it grows past 1.5x the original / 300 chars.

        Args:
            summary: Generated summary text
            surf_data: {"waveHeight", "wavePeriod", "windSpeed", "windDirection"} for context

        Returns:
            ValidationResult
        """
        if self.model is None:
            return ValidationResult(summary, False, fallback=True, reason="Gemini API key not configured")

        prompt = build_validation_prompt(summary, surf_data)
        debug_log(f"Validation prompt length: {len(prompt)} chars", "LLM")

        try:
            response = self.model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(
                    max_output_tokens=150,
                    temperature=0.3,
                ),
            )
            validated = (response.text or "").strip().strip('"').strip()
        except Exception as e:
            log.warning(f"Summary validation failed, returning original summary: {e}")
            return ValidationResult(summary, False, fallback=True, extra={"error": str(e)})

        debug_log(f"Validation response length: {len(validated)} chars", "LLM")

        if not validated:
            return ValidationResult(summary, False, fallback=True, reason="Empty response")

        if len(validated) > len(summary) * MAX_LENGTH_RATIO or len(validated) > MAX_LENGTH_CHARS:
            return ValidationResult(summary, False, fallback=True, reason="AI response too different from original")

        if not _emoji_in(summary) <= _emoji_in(validated):
            return ValidationResult(summary, False, fallback=True, reason="AI response dropped the emoji")

        return ValidationResult(
            validated,
            True,
            extra={"originalLength": len(summary), "validatedLength": len(validated)},
        )
