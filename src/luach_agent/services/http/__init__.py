"""HTTP services for the calendar assistant."""

from .server import app, chat, invoke_api_function, list_api_functions, run_local_server

__all__ = [
    "app",
    "chat",
    "invoke_api_function",
    "list_api_functions",
    "run_local_server",
]
