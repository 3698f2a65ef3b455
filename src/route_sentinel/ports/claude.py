import logging

from route_sentinel.data import PortPair, Usage
from route_sentinel.errors import ReplyParseError
from route_sentinel.llm import ClaudeCompleter, parse_json_object
from route_sentinel.prompts import PORT_EXTRACTION_PROMPT, PromptTemplate

logger = logging.getLogger(__name__)


class ClaudePortExtractor:
    """Ask Claude for the two endpoint ports named in a route.

    Args:
        completer: Shared Claude client.
        max_tokens: Output bound for the extraction call.
        prompt: Template with a ``$route`` placeholder. The model must be
            told to reply with ``{"port1": ..., "port2": ...}``.

    Any failure of the extraction call degrades to ``None``, including the
    ``TypeError`` the SDK raises when no credentials are configured.
    """

    def __init__(
        self,
        completer: ClaudeCompleter,
        *,
        max_tokens: int = 100,
        prompt: PromptTemplate = PORT_EXTRACTION_PROMPT,
    ) -> None:
        self._completer = completer
        self._max_tokens = max_tokens
        self._prompt = prompt

    async def extract(self, route: str) -> tuple[PortPair | None, Usage]:
        content = self._prompt.render(route=route)
        try:
            completion = await self._completer.complete(
                [{"role": "user", "content": content}],
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            logger.warning("Port extraction error for %r: %s", route, e)
            return (None, Usage())

        try:
            parsed = parse_json_object(completion.text)
        except ReplyParseError as e:
            logger.warning("Port extraction reply unparseable for %r: %s", route, e)
            return (None, completion.usage)

        port1 = parsed.get("port1")
        port2 = parsed.get("port2")
        if not isinstance(port1, str) or not isinstance(port2, str):
            logger.warning("Port extraction reply missing port names: %r", parsed)
            return (None, completion.usage)
        port1, port2 = port1.strip(), port2.strip()
        if not port1 or not port2:
            logger.warning("Port extraction reply has blank port names: %r", parsed)
            return (None, completion.usage)

        return (PortPair(port1=port1, port2=port2), completion.usage)
