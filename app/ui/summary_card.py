# ABOUTME: HTML rendering for the surf AI summary card
# ABOUTME: Tier drives the CSS class, confidence renders as a five-dot indicator

import html

CONFIDENCE_DOTS = 5

LOADING_CARD = {
    "emoji": "🔄",
    "quality": "unknown",
    "confidence": 0,
    "text": "🤖 Analyzing current surf conditions...",
}


def confidence_dots_html(confidence: int) -> str:
    """Five dots, the first `confidence` of them active."""
    dots = []
    for i in range(CONFIDENCE_DOTS):
        css = "confidence-dot active" if i < confidence else "confidence-dot"
        dots.append(f'<span class="{css}">•</span>')
    return f'<span class="confidence-indicator">{"".join(dots)}</span>'


def summary_card_html(emoji: str, quality: str, confidence: int, text: str) -> str:
    """Render the full card; quality becomes a CSS class (firing, epic, ...)."""
    return (
        f'<div class="ai-summary-content {html.escape(quality)}">'
        f'<div class="ai-header">'
        f'<span class="ai-emoji">{html.escape(emoji)}</span>'
        f'<span class="ai-label">🤖 SURF AI</span>'
        f'{confidence_dots_html(confidence)}'
        f'</div>'
        f'<div class="ai-summary-text">{html.escape(text)}</div>'
        f'</div>'
    )


def loading_card_html() -> str:
    return summary_card_html(**LOADING_CARD)
