from .earnings import MarketerEarnings
from .marketer import Marketer, generate_referrer_code

__all__ = ["Marketer", "MarketerEarnings", "generate_referrer_code"]
