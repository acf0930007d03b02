from .rate_limit import get_client_ip, limiter

__all__ = ["limiter", "get_client_ip"]
