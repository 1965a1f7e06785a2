from neighborhood_api.services.hackatime.client import HackatimeClient, HackatimeError

__all__ = ["HackatimeClient", "HackatimeError"]
