"""Prompt templates for every model call.

User-supplied text (the route, assessment fields) is only ever inserted as a
template parameter, so braces or ``$`` signs in it are never re-expanded.
"""

from dataclasses import dataclass
from string import Template


@dataclass(frozen=True)
class PromptTemplate:
    """A prompt body with ``$name`` placeholders.

    Args:
        name: Short identifier used in logs.
        template: Body in ``string.Template`` syntax.
    """

    name: str
    template: str

    def render(self, **params: object) -> str:
        """Substitute every placeholder.

        Raises:
            KeyError: If a placeholder has no matching parameter.
        """
        return Template(self.template).substitute({k: str(v) for k, v in params.items()})


PORT_EXTRACTION_PROMPT = PromptTemplate(
    name="port_extraction",
    template="""\
Extract the two main port or location names from this shipping route: "$route"

Respond with raw JSON only. No markdown, no extra text:
{"port1": "first port name", "port2": "second port name"}""",
)

ASSESSMENT_PROMPT = PromptTemplate(
    name="assessment",
    template="""\
You are a maritime shipping expert and risk analyst. Assess the following \
shipping route based on your knowledge AND the latest real-time news headlines \
provided below.

Route: $route

Latest News Headlines:
$headlines

Based on both your knowledge and these headlines, provide a full assessment.

Respond with raw JSON only. No markdown, no code blocks, no extra text. Exactly this structure:
{
  "verdict": "Safe" or "At Risk",
  "score": <number 0-100>,
  "reason": "2-3 sentence explanation",
  "factors": ["factor 1", "factor 2", "factor 3"],
  "shipping_line": "Best shipping line to use on this route and why in one sentence",
  "transit_time": "Approximate transit time e.g. 14-18 days",
  "transhipment": {
    "count": <number of transhipment ports>,
    "ports": ["port 1", "port 2"]
  },
  "route_overview": "A 2-sentence description of the full route path from origin to destination including key waypoints",
  "news_used": true
}""",
)

CHAT_CONTEXT_PROMPT = PromptTemplate(
    name="chat_context",
    template="""\
You are a maritime shipping risk analyst assistant. The user has just assessed this shipping route:

Route: $route
Verdict: $verdict
Risk Score: $score/100
Reason: $reason
Risk Factors: $factors
Best Shipping Line: $shipping_line
Transit Time: $transit_time
Transhipment Ports: $transhipment_ports
Route Overview: $route_overview
Latest News Used: $headlines

The user will now ask follow-up questions about this route. Be concise, helpful, and professional.""",
)

CHAT_ACKNOWLEDGEMENT_PROMPT = PromptTemplate(
    name="chat_acknowledgement",
    template=(
        "Understood. I've assessed the $route route as $verdict with a risk score "
        "of $score/100. I'm ready to answer any follow-up questions."
    ),
)
