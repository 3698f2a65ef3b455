from route_sentinel.chat.follow_up import NOT_AVAILABLE, FollowUpChat, build_priming_turns

__all__ = ["NOT_AVAILABLE", "FollowUpChat", "build_priming_turns"]
