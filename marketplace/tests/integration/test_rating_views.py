from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from infrastructure.container import container
from marketplace.models import Rating
from marketplace.tests.auth import authenticate
from marketplace.tests.factories import CustomerFactory, MerchantFactory, ProductFactory, RatingFactory


class RatingViewTests(TestCase):
    def setUp(self):
        container.configure_for_testing()
        self.client = APIClient()
        self.customer = CustomerFactory(first_name="Ada", last_name="Obi")
        self.product = ProductFactory()
        authenticate(self.client, self.customer)
        self.url = reverse("product-ratings", kwargs={"product_id": self.product.id})

    def tearDown(self):
        container.reset()

    def test_rate_then_read_summary(self):
        response = self.client.post(self.url, {"rating": 5, "review": "Solid"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["customer_id"], str(self.customer.id))

        RatingFactory(product=self.product, rating=3)
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 2)
        self.assertEqual(response.data["average"], 4.0)

    def test_second_rating_conflicts(self):
        RatingFactory(customer=self.customer, product=self.product)

        response = self.client.post(self.url, {"rating": 2}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "already_rated")

    def test_rating_out_of_range(self):
        response = self.client.post(self.url, {"rating": 6}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_and_delete_own_rating(self):
        rating = RatingFactory(customer=self.customer, product=self.product, rating=2)
        url = reverse("rating-detail", kwargs={"rating_id": rating.id})

        response = self.client.put(url, {"rating": 4}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["rating"], 4)

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Rating.objects.exists())

    def test_cannot_change_someone_elses_rating(self):
        rating = RatingFactory(product=self.product)

        response = self.client.put(reverse("rating-detail", kwargs={"rating_id": rating.id}), {"rating": 1}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_merchants_cannot_read_ratings(self):
        authenticate(self.client, MerchantFactory())

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
