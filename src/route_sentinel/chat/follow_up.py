"""Follow-up questions about a route that has already been assessed."""

import logging

from route_sentinel.data import AssessmentContext, ChatTurn
from route_sentinel.errors import InvalidRequestError
from route_sentinel.llm import ClaudeCompleter
from route_sentinel.prompts import (
    CHAT_ACKNOWLEDGEMENT_PROMPT,
    CHAT_CONTEXT_PROMPT,
    PromptTemplate,
)

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def build_priming_turns(
    route: str,
    assessment: AssessmentContext,
    *,
    context_prompt: PromptTemplate = CHAT_CONTEXT_PROMPT,
    acknowledgement_prompt: PromptTemplate = CHAT_ACKNOWLEDGEMENT_PROMPT,
) -> list[ChatTurn]:
    """Build the scripted exchange that restates an assessment to the model.

    The server keeps no conversation state, so this pair is rebuilt and
    prepended on every chat request.
    """
    transhipment_ports = (
        ", ".join(assessment.transhipment.ports) if assessment.transhipment else NOT_AVAILABLE
    )
    context = context_prompt.render(
        route=route,
        verdict=assessment.verdict,
        score=assessment.score,
        reason=assessment.reason,
        factors=", ".join(assessment.factors),
        shipping_line=assessment.shipping_line or NOT_AVAILABLE,
        transit_time=assessment.transit_time or NOT_AVAILABLE,
        transhipment_ports=transhipment_ports,
        route_overview=assessment.route_overview or NOT_AVAILABLE,
        headlines=assessment.headlines or NOT_AVAILABLE,
    )
    acknowledgement = acknowledgement_prompt.render(
        route=route,
        verdict=assessment.verdict,
        score=assessment.score,
    )
    return [
        ChatTurn(role="user", content=context),
        ChatTurn(role="assistant", content=acknowledgement),
    ]


class FollowUpChat:
    """Answer follow-up questions using the assessment as context.

    Args:
        completer: Shared Claude client.
        max_tokens: Output bound for each reply.
    """

    def __init__(self, completer: ClaudeCompleter, *, max_tokens: int = 1024) -> None:
        self._completer = completer
        self._max_tokens = max_tokens

    async def reply(
        self,
        route: str,
        assessment: AssessmentContext | None,
        history: list[ChatTurn],
        message: str | None,
    ) -> str:
        """Return the model's reply to *message*.

        Args:
            route: The assessed route.
            assessment: The assessment previously returned for *route*.
            history: Prior turns of this conversation, oldest first.
            message: The new user message.

        Raises:
            InvalidRequestError: If the message or the assessment is missing.
        """
        if not message or not message.strip():
            raise InvalidRequestError("No message provided")
        if assessment is None:
            raise InvalidRequestError("No assessment provided")

        turns = build_priming_turns(route, assessment)
        turns.extend(history)
        turns.append(ChatTurn(role="user", content=message))

        completion = await self._completer.complete(
            [turn.to_message() for turn in turns],
            max_tokens=self._max_tokens,
        )
        logger.info(
            "Chat reply for %r after %d prior turns; %d input tokens, %d output tokens",
            route,
            len(history),
            completion.usage.input_tokens,
            completion.usage.output_tokens,
        )
        return completion.text
