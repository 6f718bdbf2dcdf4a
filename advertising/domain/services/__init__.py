from .ad_service import AdService, VerificationOutcome

__all__ = ["AdService", "VerificationOutcome"]
