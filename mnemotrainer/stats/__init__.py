from .stats import sessions_frame, summarize_sessions, query_trend, format_summary

__all__ = ["sessions_frame", "summarize_sessions", "query_trend", "format_summary"]
