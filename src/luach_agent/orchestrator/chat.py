from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import orjson
from openai import OpenAI

from ..api import call_api, get_api_functions
from ..config import AppSettings, get_settings
from .prompts import SYSTEM_PROMPT
from .verifiers import verify_tool_output

logger = logging.getLogger(__name__)


@dataclass
class ChatSession:
    """Conversation state owned by the caller and passed in on every turn."""

    messages: List[Dict[str, Any]] = field(default_factory=list)

    def add_user(self, content: str) -> None:
        self.messages.append({"role": "user", "content": content})

    def add_assistant(self, content: str) -> None:
        self.messages.append({"role": "assistant", "content": content})

    def transcript(self) -> List[Dict[str, str]]:
        return [
            {"role": message["role"], "content": message["content"]}
            for message in self.messages
            if message["role"] in {"user", "assistant"} and message.get("content")
        ]


class ChatOrchestrator:
    """Streams model replies, running registry tools until the model answers in text."""

    def __init__(self, settings: Optional[AppSettings] = None, client: Optional[Any] = None) -> None:
        self.settings = settings or get_settings()
        self._client = client if client is not None else self._build_client()
        self._tools = [func.as_tool() for func in sorted(get_api_functions(), key=lambda func: func.name)]

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    # ------------------------------------------------------------------ public API

    def stream_reply(self, session: ChatSession, user_message: str) -> Iterator[str]:
        session.add_user(user_message)
        if self._client is None:
            missing = ", ".join(self.settings.llm.missing_env_vars) or "unknown"
            notice = f"The language model is not configured. Missing: {missing}"
            session.add_assistant(notice)
            yield notice
            return

        for step in range(self.settings.chat.max_steps):
            text_parts: List[str] = []
            calls: Dict[int, Dict[str, str]] = {}
            stream = self._client.chat.completions.create(
                model=self.settings.llm.model,
                temperature=self.settings.llm.temperature,
                messages=[{"role": "system", "content": SYSTEM_PROMPT}, *session.messages],
                tools=self._tools,
                tool_choice="auto",
                stream=True,
            )
            for chunk in stream:
                if not chunk.choices:
                    continue
                delta = chunk.choices[0].delta
                if delta.content:
                    text_parts.append(delta.content)
                    yield delta.content
                for tool_call in delta.tool_calls or []:
                    slot = calls.setdefault(tool_call.index, {"id": "", "name": "", "arguments": ""})
                    if tool_call.id:
                        slot["id"] = tool_call.id
                    if tool_call.function is not None:
                        slot["name"] += tool_call.function.name or ""
                        slot["arguments"] += tool_call.function.arguments or ""

            text = "".join(text_parts)
            if not calls:
                session.add_assistant(text)
                return

            ordered = [calls[index] for index in sorted(calls)]
            session.messages.append(
                {
                    "role": "assistant",
                    "content": text or None,
                    "tool_calls": [
                        {
                            "id": call["id"],
                            "type": "function",
                            "function": {"name": call["name"], "arguments": call["arguments"] or "{}"},
                        }
                        for call in ordered
                    ],
                }
            )
            for call in ordered:
                output = self._run_tool(call["name"], call["arguments"])
                session.messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": call["id"],
                        "content": orjson.dumps(output).decode("utf-8"),
                    }
                )
            logger.debug("Step %d ran %d tool calls", step + 1, len(ordered))

        notice = "I could not finish answering within the allowed number of tool calls."
        session.add_assistant(notice)
        yield notice

    # ------------------------------------------------------------------ helpers

    def _build_client(self) -> Optional[OpenAI]:
        if not self.settings.llm.is_configured:
            return None
        return OpenAI(
            api_key=self.settings.llm.api_key,
            base_url=self.settings.llm.base_url,
            organization=self.settings.llm.organization,
            project=self.settings.llm.project,
        )

    def _safe_json(self, raw: Any) -> Dict[str, Any]:
        if not raw:
            return {}
        try:
            parsed = json.loads(raw)
            return parsed if isinstance(parsed, dict) else {}
        except json.JSONDecodeError:
            return {}

    def _run_tool(self, name: str, raw_arguments: str) -> Any:
        arguments = self._safe_json(raw_arguments)
        try:
            output = call_api(name, **arguments)
        except (KeyError, ValueError, TypeError) as exc:
            logger.warning("Tool %s rejected arguments %s: %s", name, arguments, exc)
            return {"error": f"Tool `{name}` failed: {exc}"}
        verification = verify_tool_output(name, output)
        logger.info("Tool %s -> %s", name, verification.summary)
        return output
