from route_sentinel.llm.claude import DEFAULT_MODEL, ClaudeCompleter, Completion
from route_sentinel.llm.replies import parse_json_object, strip_code_fences

__all__ = [
    "DEFAULT_MODEL",
    "ClaudeCompleter",
    "Completion",
    "parse_json_object",
    "strip_code_fences",
]
