"""RatingService - customer ratings and reviews of products."""

from typing import Dict

from django.db.models import Avg, Count

from marketplace.infra.observability.metrics import ratings_submitted_total
from marketplace.models import Product, Rating
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


class RatingService(BaseService):
    @BaseService.log_performance
    def get_ratings(self, product_id) -> ServiceResult[Dict]:
        if not Product.objects.filter(pk=product_id).exists():
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")

        ratings = Rating.objects.filter(product_id=product_id).select_related("customer")
        summary = ratings.aggregate(average=Avg("rating"), count=Count("id"))
        average = round(summary["average"], 2) if summary["average"] is not None else None
        return service_ok({"ratings": list(ratings), "average": average, "count": summary["count"]})

    @BaseService.log_performance
    def create_rating(self, customer, product_id, data: dict) -> ServiceResult[Rating]:
        if not Product.objects.filter(pk=product_id).exists():
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, f"Product {product_id} does not exist")
        if Rating.objects.filter(customer=customer, product_id=product_id).exists():
            return service_err(ErrorCodes.ALREADY_RATED, "You have already rated this product")

        rating = Rating.objects.create(
            customer=customer,
            product_id=product_id,
            rating=data["rating"],
            review=data.get("review", ""),
        )
        ratings_submitted_total.labels(stars=str(rating.rating)).inc()
        return service_ok(rating)

    @BaseService.log_performance
    def update_rating(self, customer, rating_id, data: dict) -> ServiceResult[Rating]:
        rating = self._owned_rating(customer, rating_id)
        if not rating.ok:
            return rating
        rating = rating.value
        for field in ("rating", "review"):
            if field in data:
                setattr(rating, field, data[field])
        rating.save()
        return service_ok(rating)

    @BaseService.log_performance
    def delete_rating(self, customer, rating_id) -> ServiceResult[None]:
        rating = self._owned_rating(customer, rating_id)
        if not rating.ok:
            return rating
        rating.value.delete()
        return service_ok(None)

    def _owned_rating(self, customer, rating_id) -> ServiceResult[Rating]:
        rating = Rating.objects.filter(pk=rating_id).first()
        if rating is None:
            return service_err(ErrorCodes.RATING_NOT_FOUND, f"Rating {rating_id} does not exist")
        if rating.customer_id != customer.id:
            return service_err(ErrorCodes.NOT_RESOURCE_OWNER, "You can only change your own ratings")
        return service_ok(rating)
