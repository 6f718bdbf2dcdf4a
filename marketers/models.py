from marketers.domain.models import Marketer, MarketerEarnings

__all__ = ["Marketer", "MarketerEarnings"]
