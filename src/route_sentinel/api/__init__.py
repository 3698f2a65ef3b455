from route_sentinel.api.app import create_app

__all__ = ["create_app"]
