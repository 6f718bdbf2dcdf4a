"""
ProductService - Product catalog CRUD and images.

Listing is public. Every mutation checks that the calling merchant owns the
product. A product keeps at most ``PRODUCT_MAX_IMAGES`` images, exactly one
of which is the display image while it has any.
"""

from typing import Dict, Iterable, List, Optional

from django.conf import settings
from django.db import transaction

from authentication.models import Merchant
from marketplace.infra.observability.metrics import product_images_uploaded, product_price, products_created_total
from marketplace.models import Market, Product, ProductImage
from utils.pagination import paginate
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok
from utils.uploads import store_image

PRODUCT_FIELDS = ("name", "details", "description", "price", "prev_price", "stock", "category")


class ProductService(BaseService):
    """
    Service for the product catalog.

    Dependencies:
    - storage: StorageInterface used for product images
    """

    def __init__(self, storage):
        super().__init__()
        self.storage = storage

    # Reads

    @BaseService.log_performance
    def list_products(
        self,
        page: int = 1,
        page_size: Optional[int] = None,
        category: Optional[str] = None,
        state: Optional[str] = None,
    ) -> ServiceResult[Dict]:
        """
        Paginated product listing.

        Args:
            category: Restrict to one ProductCategory
            state: Restrict to merchants with an address in this state
        """
        queryset = Product.objects.with_relations()
        if category:
            queryset = queryset.in_category(category)
        if state:
            queryset = queryset.in_state(state)
        return service_ok(paginate(queryset.order_by("-created_at"), page, page_size))

    @BaseService.log_performance
    def get_product(self, product_id) -> ServiceResult[Product]:
        product = Product.objects.with_relations().filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")
        return service_ok(product)

    @BaseService.log_performance
    def get_by_merchant(self, merchant_id, page: int = 1, page_size: Optional[int] = None) -> ServiceResult[Dict]:
        if not Merchant.objects.filter(pk=merchant_id).exists():
            return service_err(ErrorCodes.MERCHANT_NOT_FOUND, f"Merchant {merchant_id} does not exist")
        queryset = Product.objects.with_relations().for_merchant(merchant_id).order_by("-created_at")
        return service_ok(paginate(queryset, page, page_size))

    @BaseService.log_performance
    def get_by_market(self, market_id, page: int = 1, page_size: Optional[int] = None) -> ServiceResult[Dict]:
        if not Market.objects.filter(pk=market_id).exists():
            return service_err(ErrorCodes.MARKET_NOT_FOUND, f"Market {market_id} does not exist")
        queryset = Product.objects.with_relations().for_market(market_id).order_by("-created_at")
        return service_ok(paginate(queryset, page, page_size))

    # Writes

    @BaseService.log_performance
    def create_product(self, merchant, data: dict, images: Iterable = ()) -> ServiceResult[Product]:
        images = list(images)
        if len(images) > settings.PRODUCT_MAX_IMAGES:
            return service_err(
                ErrorCodes.TOO_MANY_IMAGES, f"A product can have at most {settings.PRODUCT_MAX_IMAGES} images"
            )

        stored = self._store_images(images)
        if not stored.ok:
            return stored

        with transaction.atomic():
            product = Product.objects.create(
                merchant=merchant, **{field: data[field] for field in PRODUCT_FIELDS if field in data}
            )
            ProductImage.objects.bulk_create(
                ProductImage(product=product, key=file.key, url=file.url, is_display=index == 0)
                for index, file in enumerate(stored.value)
            )

        products_created_total.inc()
        product_price.observe(float(product.price))
        self.logger.info(f"Merchant {merchant.id} created product {product.id} with {len(images)} image(s)")
        return self.get_product(product.id)

    @BaseService.log_performance
    def update_product(self, merchant, product_id, data: dict) -> ServiceResult[Product]:
        """
        Update product fields. A new ``price`` moves the current price into
        ``prev_price`` unless ``prev_price`` is supplied explicitly.
        """
        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product
        product = product.value

        if "price" in data and "prev_price" not in data and data["price"] != product.price:
            product.prev_price = product.price

        for field in PRODUCT_FIELDS:
            if field in data:
                setattr(product, field, data[field])
        product.save()
        return self.get_product(product.id)

    @BaseService.log_performance
    def delete_product(self, merchant, product_id) -> ServiceResult[None]:
        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product
        image_keys = list(product.value.images.values_list("key", flat=True))
        product.value.delete()
        for key in image_keys:
            self.storage.delete(key)
        return service_ok(None)

    @BaseService.log_performance
    def add_images(self, merchant, product_id, images: Iterable) -> ServiceResult[Product]:
        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product
        product = product.value

        images = list(images)
        existing = product.images.count()
        if existing + len(images) > settings.PRODUCT_MAX_IMAGES:
            return service_err(
                ErrorCodes.TOO_MANY_IMAGES,
                f"A product can have at most {settings.PRODUCT_MAX_IMAGES} images ({existing} already uploaded)",
            )

        stored = self._store_images(images)
        if not stored.ok:
            return stored

        ProductImage.objects.bulk_create(
            ProductImage(product=product, key=file.key, url=file.url, is_display=existing == 0 and index == 0)
            for index, file in enumerate(stored.value)
        )
        return self.get_product(product.id)

    @BaseService.log_performance
    @transaction.atomic
    def remove_image(self, merchant, product_id, image_id) -> ServiceResult[Product]:
        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product

        image = ProductImage.objects.filter(pk=image_id, product=product.value).first()
        if image is None:
            return service_err(ErrorCodes.IMAGE_NOT_FOUND, f"Image {image_id} does not belong to this product")

        was_display = image.is_display
        key = image.key
        image.delete()
        if was_display:
            replacement = product.value.images.order_by("created_at").first()
            if replacement is not None:
                replacement.is_display = True
                replacement.save(update_fields=["is_display"])

        transaction.on_commit(lambda: self.storage.delete(key))
        return self.get_product(product.value.id)

    @BaseService.log_performance
    @transaction.atomic
    def make_display_image(self, merchant, product_id, image_id) -> ServiceResult[Product]:
        product = self._owned_product(merchant, product_id)
        if not product.ok:
            return product

        if not ProductImage.objects.filter(pk=image_id, product=product.value).exists():
            return service_err(ErrorCodes.IMAGE_NOT_FOUND, f"Image {image_id} does not belong to this product")

        product.value.images.update(is_display=False)
        ProductImage.objects.filter(pk=image_id).update(is_display=True)
        return self.get_product(product.value.id)

    # Helpers

    def _owned_product(self, merchant, product_id) -> ServiceResult[Product]:
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")
        if product.merchant_id != merchant.id:
            return service_err(ErrorCodes.NOT_PRODUCT_OWNER, "You do not own this product")
        return service_ok(product)

    def _store_images(self, images: List) -> ServiceResult[list]:
        """Upload every image or none: already-stored files are removed if a later one fails."""
        stored = []
        for image in images:
            result = store_image(self.storage, image, "products")
            if not result.ok:
                for file in stored:
                    self.storage.delete(file.key)
                return result
            stored.append(result.value)
            product_images_uploaded.inc()
        return service_ok(stored)
