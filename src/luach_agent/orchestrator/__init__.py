"""Tool-calling chat orchestration."""

from __future__ import annotations

from .chat import ChatOrchestrator, ChatSession
from .verifiers import VerificationResult, verify_tool_output

__all__ = ["ChatOrchestrator", "ChatSession", "VerificationResult", "verify_tool_output"]
