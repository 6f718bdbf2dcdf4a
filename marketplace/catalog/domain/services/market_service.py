"""MarketService - markets and malls merchants trade from."""

from django.db import transaction

from marketplace.models import Market
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.uploads import store_image

MARKET_FIELDS = ("name", "description", "address", "city", "state", "is_mall")


class MarketService(BaseService):
    def __init__(self, storage):
        super().__init__()
        self.storage = storage

    @BaseService.log_performance
    def get_market_names(self) -> ServiceResult[list]:
        return service_ok(list(Market.objects.order_by("name").values("id", "name", "is_mall")))

    @BaseService.log_performance
    def get_all_markets(self) -> ServiceResult[list]:
        return service_ok(list(Market.objects.markets()))

    @BaseService.log_performance
    def get_all_malls(self) -> ServiceResult[list]:
        return service_ok(list(Market.objects.malls()))

    @BaseService.log_performance
    def get_market(self, market_id) -> ServiceResult[Market]:
        market = Market.objects.filter(pk=market_id).first()
        if market is None:
            return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market {market_id} does not exist")
        return service_ok(market)

    @BaseService.log_performance
    def create_market(self, data: dict, display_image=None) -> ServiceResult[Market]:
        if Market.objects.filter(name__iexact=data["name"]).exists():
            return service_err(ErrorCodes.MARKET_NAME_TAKEN, f"A market named '{data['name']}' already exists")

        market = Market(**{field: data[field] for field in MARKET_FIELDS if field in data})
        if display_image is not None:
            upload = store_image(self.storage, display_image, "markets")
            if not upload.ok:
                return upload
            market.display_image = upload.value.url
            market.display_image_key = upload.value.key

        market.save()
        self.logger.info(f"Created market {market.id} ({market.name})")
        return service_ok(market)

    @BaseService.log_performance
    def update_market(self, market_id, data: dict, display_image=None) -> ServiceResult[Market]:
        market = Market.objects.filter(pk=market_id).first()
        if market is None:
            return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market {market_id} does not exist")

        name = data.get("name")
        if name and Market.objects.filter(name__iexact=name).exclude(pk=market.pk).exists():
            return service_err(ErrorCodes.MARKET_NAME_TAKEN, f"A market named '{name}' already exists")

        for field in MARKET_FIELDS:
            if field in data:
                setattr(market, field, data[field])

        old_image_key = None
        if display_image is not None:
            upload = store_image(self.storage, display_image, "markets")
            if not upload.ok:
                return upload
            old_image_key = market.display_image_key
            market.display_image = upload.value.url
            market.display_image_key = upload.value.key

        market.save()
        if old_image_key:
            self.storage.delete(old_image_key)
        return service_ok(market)

    @BaseService.log_performance
    def delete_market(self, market_id) -> ServiceResult[None]:
        market = Market.objects.filter(pk=market_id).first()
        if market is None:
            return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market {market_id} does not exist")
        image_key = market.display_image_key
        market.delete()
        if image_key:
            self.storage.delete(image_key)
        return service_ok(None)

    @BaseService.log_performance
    @transaction.atomic
    def delete_all_markets(self) -> ServiceResult[int]:
        image_keys = [key for key in Market.objects.values_list("display_image_key", flat=True) if key]
        deleted, _ = Market.objects.all().delete()

        def purge_images():
            for key in image_keys:
                self.storage.delete(key)

        transaction.on_commit(purge_images)
        self.logger.warning(f"Deleted all markets ({deleted} rows)")
        return service_ok(deleted)
