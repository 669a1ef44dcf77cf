from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": self.ok, "summary": self.summary}


def verify_tool_output(tool_name: str, output: Optional[Any]) -> VerificationResult:
    if output is None:
        return VerificationResult(False, "No output returned.")

    if tool_name == "todaysDate":
        return VerificationResult(True, f"Current time {output}.") if isinstance(output, str) else VerificationResult(
            False, "Timestamp is not a string."
        )

    if not isinstance(output, dict):
        return VerificationResult(False, "Output is not a mapping.")

    if tool_name == "convertDate":
        if output.get("success"):
            hebrew = output.get("hebrewDate") or {}
            gregorian = output.get("gregorianDate") or {}
            return VerificationResult(True, f"{gregorian.get('iso')} is {hebrew.get('formatted')}.")
        return VerificationResult(False, output.get("error") or "Conversion failed.")

    if tool_name == "findJewishHoliday":
        if output.get("found"):
            return VerificationResult(
                True,
                f"Matched {len(output.get('holidays') or [])} events with {output.get('zmanimCount', 0)} zmanim.",
            )
        return VerificationResult(False, output.get("error") or output.get("message") or "No holiday found.")

    if tool_name == "listJewishHolidays":
        if "error" in output:
            return VerificationResult(False, output["error"])
        return VerificationResult(True, f"Returned {output.get('totalHolidays', 0)} events.")

    if "error" in output:
        return VerificationResult(False, str(output["error"]))
    return VerificationResult(True, "Ran without explicit verifier.")
