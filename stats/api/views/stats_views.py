from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from authentication.models import CustomerRole
from authentication.permissions import CustomerAuthGuard
from infrastructure.container import container
from utils.responses import service_response


class StatsView(APIView):
    """Admin-only analytics; ``stat`` names the StatsService method to call."""

    permission_classes = [CustomerAuthGuard.authorise(strict=True, role=CustomerRole.ADMIN)]
    stat = "all_stats"
    result_key = None

    @extend_schema(tags=["Stats"])
    def get(self, request):
        result = getattr(container.stats_service(), self.stat)()
        if self.result_key:
            return service_response(result, lambda value: {self.result_key: value})
        return service_response(result)
