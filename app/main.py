# ABOUTME: Main NiceGUI web application entry point
# ABOUTME: Shows the surf AI summary card and serves the summary validation endpoint

import asyncio
import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from nicegui import app as nicegui_app
from nicegui import ui, Client

from app.api.validate_summary import handle_validate_summary
from app.config import Config
from app.orchestrator import AppOrchestrator
from app.ui.summary_card import loading_card_html, summary_card_html

log = logging.getLogger(__name__)

# Initialize orchestrator
orchestrator = AppOrchestrator(api_key=Config.GEMINI_API_KEY)


@nicegui_app.post('/api/validate-summary')
async def validate_summary_endpoint(request: Request):
    """Polish a summary with the LLM, falling back to the original text"""
    try:
        body = await request.json()
    except ValueError:
        body = None

    loop = asyncio.get_event_loop()
    status, payload = await loop.run_in_executor(
        None, lambda: handle_validate_summary(body, orchestrator.llm_client)
    )
    return JSONResponse(payload, status_code=status)


@ui.page('/')
async def index(client: Client):
    """Main page with the surf AI card"""

    ui.add_head_html("""
    <style>
        body {
            background-color: #0b1f33;
            color: #f4f7fa;
            font-family: Arial, sans-serif;
        }
        .title {
            font-size: clamp(24px, 6vw, 40px);
            font-weight: bold;
            margin-top: 2vh;
            text-align: center;
        }
        .ai-summary-content {
            max-width: 640px;
            margin-top: 3vh;
            padding: 16px 20px;
            border-radius: 12px;
            border: 2px solid #4a6b8a;
            background: #12304d;
        }
        .ai-summary-content.firing { border-color: #ff4d00; background: #3d1a0a; }
        .ai-summary-content.epic { border-color: #ffd000; }
        .ai-summary-content.good { border-color: #2ecc71; }
        .ai-summary-content.fair { border-color: #95a5a6; }
        .ai-summary-content.poor { border-color: #e67e22; }
        .ai-summary-content.terrible { border-color: #c0392b; }
        .ai-header {
            display: flex;
            align-items: center;
            gap: 10px;
            margin-bottom: 8px;
        }
        .ai-emoji { font-size: 28px; }
        .ai-label { font-weight: bold; letter-spacing: 1px; }
        .confidence-indicator { margin-left: auto; }
        .confidence-dot { color: #4a6b8a; font-size: 24px; }
        .confidence-dot.active { color: #2ecc71; }
        .ai-summary-text { font-size: clamp(14px, 3vw, 18px); line-height: 1.5; }
        .timestamp {
            margin-top: 2vh;
            font-size: 12px;
            color: #9fb3c8;
            text-align: center;
        }
    </style>
    """)

    with ui.column().classes('w-full items-center'):
        ui.html(f'<div class="title">{Config.LOCATION_NAME.upper()} SURF</div>', sanitize=False)
        card = ui.html(loading_card_html(), sanitize=False)
        timestamp_label = ui.html('<div class="timestamp">Last updated: --</div>', sanitize=False)

    current_request_id = None
    current_forecast = None

    def render(forecast, text=None):
        nonlocal current_forecast
        current_forecast = forecast
        card.content = summary_card_html(
            emoji=forecast.emoji,
            quality=forecast.quality,
            confidence=forecast.confidence,
            text=text or forecast.text,
        )

    def render_offline():
        card.content = summary_card_html(
            emoji="📡",
            quality="unknown",
            confidence=0,
            text="Buoy or wind data is unavailable right now. Check back soon.",
        )

    async def run_validation(request_id):
        """Background: polish whatever text the forecast currently shows"""
        loop = asyncio.get_event_loop()
        result = await loop.run_in_executor(None, lambda: orchestrator.validate_summary(request_id))
        if result is None or request_id != current_request_id:
            return
        if current_forecast is not None:
            render(current_forecast, orchestrator.get_display_text(request_id))

    async def run_prediction(request_id):
        """Background: fold in the ML score, then re-validate the new wording"""
        loop = asyncio.get_event_loop()
        forecast = await loop.run_in_executor(None, lambda: orchestrator.fetch_prediction(request_id))
        if forecast is None or request_id != current_request_id:
            return
        render(forecast)
        await run_validation(request_id)

    async def refresh():
        nonlocal current_request_id, current_forecast
        try:
            loop = asyncio.get_event_loop()
            data = await loop.run_in_executor(None, orchestrator.get_forecast)
        except Exception as e:
            log.error(f"Forecast refresh error: {e}")
            render_offline()
            return

        if data["is_offline"]:
            current_request_id = None
            current_forecast = None
            render_offline()
            return

        current_request_id = data["request_id"]
        render(data["forecast"])

        if data["timestamp"]:
            timestamp_label.content = (
                f'<div class="timestamp">Last updated: {data["timestamp"].strftime("%Y-%m-%d %H:%M UTC")}</div>'
            )

        # Independent: neither waits for the other
        background = [run_validation(current_request_id)]
        if orchestrator.prediction_client.is_configured:
            background.append(run_prediction(current_request_id))
        await asyncio.gather(*background)

    async def initial_load():
        await client.connected()
        await refresh()

    ui.timer(0.1, initial_load, once=True)
    ui.timer(Config.UI_REFRESH_SECONDS, refresh)


if __name__ in {"__main__", "__mp_main__"}:
    import os
    port = int(os.environ.get('PORT', 8080))
    ui.run(
        title='Ocean Beach Surf AI',
        host='0.0.0.0',
        port=port,
        reload=False  # Disable reload in production
    )
