from .marketer_service import MarketerService

__all__ = ["MarketerService"]
