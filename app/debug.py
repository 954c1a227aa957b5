# ABOUTME: Debug logging helper gated on the DEBUG env var
# ABOUTME: Prints categorized lines to stdout so Cloud Run captures them

from app.config import Config


def debug_log(message: str, category: str = "APP") -> None:
    """Print a debug line when DEBUG=true, otherwise do nothing."""
    if not Config.DEBUG:
        return
    print(f"[DEBUG][{category}] {message}", flush=True)
