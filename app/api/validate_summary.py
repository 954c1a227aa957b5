# ABOUTME: Request handler for POST /api/validate-summary
# ABOUTME: Validates the body and proxies to the LLM client, degrading to the original summary

import logging
from typing import Any

from app.ai.llm_client import LLMClient, ValidationResult

log = logging.getLogger(__name__)


def handle_validate_summary(body: Any, llm_client: LLMClient) -> tuple[int, dict]:
    """
    Handle a validation request.

    Args:
        body: Parsed JSON body, {"summary": str, "surfData": {...}}
        llm_client: Client used to polish the text

    Returns:
        (status_code, payload). 400 when summary is missing, otherwise 200
        with the validated or original summary.
    """
    if not isinstance(body, dict) or not body.get("summary"):
        return 400, {"error": "Summary is required"}

    summary = str(body["summary"])
    surf_data = body.get("surfData")
    if not isinstance(surf_data, dict):
        surf_data = {}

    try:
        result = llm_client.validate_summary(summary, surf_data)
    except Exception as e:
        log.error(f"Summary validation error: {e}")
        result = ValidationResult(summary, False, fallback=True, extra={"error": str(e)})

    return 200, result.to_dict()
