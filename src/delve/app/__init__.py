from .runner import run_gui, run_headless, summarize

__all__ = ["run_gui", "run_headless", "summarize"]
