"""
Prompt Architect - CONNECTOR: Model Adapters
Per-family polish applied as the last rewrite step

Supported families:
- claude: structured-markup (XML task tags, <thinking> block)
- gpt: instruction-following (markdown heading, verification step)
- gemini: grounding-sensitive (anti-hallucination note, bracket delimiters)

Adapters are stateless: optimize(text, report) -> text.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional

from ..core.types import AnalysisReport
from ..engine.tokens import get_ratio, DEFAULT_RATIO
from ..validation_utils import coerce_model

logger = logging.getLogger(__name__)


class ModelAdapter(ABC):
    """Abstract base class for model adapters."""

    name: str = ""
    provider: str = ""
    model: str = ""

    @abstractmethod
    def optimize(self, text: str, report: AnalysisReport) -> str:
        """Apply family-specific conventions to an already rewritten prompt."""
        pass

    def describe(self) -> Dict[str, Any]:
        return {
            "id": self.model or "default",
            "name": self.name,
            "provider": self.provider,
            "token_ratio": get_ratio(self.model) if self.model else DEFAULT_RATIO,
        }


class ClaudeAdapter(ModelAdapter):
    name = "Claude 4.5"
    provider = "Anthropic"
    model = "claude"

    def optimize(self, text: str, report: AnalysisReport) -> str:
        result = text

        if "<task>" not in text and "<context>" not in text:
            result = f"<task>\n{result}\n</task>"

        if report.score < 80:
            result += "\n\nAnalyze the request carefully in a <thinking> block before providing your final response."

        return result


class GPTAdapter(ModelAdapter):
    name = "GPT-5"
    provider = "OpenAI"
    model = "gpt"

    def optimize(self, text: str, report: AnalysisReport) -> str:
        result = text

        if "#" not in text:
            result = f"### Task Overview\n{result}"

        if report.altitude == "too-high":
            result += "\n\nReason step-by-step and verify your logic for accuracy."

        return result


class GeminiAdapter(ModelAdapter):
    name = "Gemini 3"
    provider = "Google"
    model = "gemini"

    def optimize(self, text: str, report: AnalysisReport) -> str:
        result = text
        lower = text.lower()

        if "fact" not in lower and "source" not in lower:
            result += "\n\nEnsure strict grounding in the provided context. Do not hallucinate details."

        if report.word_count > 100:
            result = f"[INSTRUCTIONS]\n{result}\n[/INSTRUCTIONS]"

        return result


class PassthroughAdapter(ModelAdapter):
    """Fallback for unknown families: leaves the text alone."""
    name = "Generic"
    provider = "Unknown"
    model = ""

    def optimize(self, text: str, report: AnalysisReport) -> str:
        return text


ADAPTERS: Dict[str, ModelAdapter] = {
    "claude": ClaudeAdapter(),
    "gpt": GPTAdapter(),
    "gemini": GeminiAdapter(),
}

_PASSTHROUGH = PassthroughAdapter()


def get_adapter(model: Optional[str]) -> ModelAdapter:
    """Adapter for a model id; unknown ids degrade to the passthrough adapter."""
    key = coerce_model(model)
    if key is None:
        return _PASSTHROUGH
    return ADAPTERS[key]


def list_adapters() -> List[Dict[str, Any]]:
    return [adapter.describe() for adapter in ADAPTERS.values()]
