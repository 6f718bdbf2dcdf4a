from prometheus_client import Counter, Histogram


# Catalog Metrics
products_created_total = Counter("marketplace_products_created_total", "Total products created")
product_images_uploaded = Counter("marketplace_product_images_uploaded_total", "Product images stored")
product_price = Histogram(
    "marketplace_product_price",
    "Listed product price distribution",
    buckets=[500, 1000, 5000, 10000, 50000, 100000, 500000, float("inf")],
)

# Cart Metrics
cart_updates_total = Counter("marketplace_cart_updates_total", "Cart line changes", ["action"])
cart_stock_rejections = Counter("marketplace_cart_stock_rejections_total", "Cart updates rejected for low stock")

# Rating Metrics
ratings_submitted_total = Counter("marketplace_ratings_submitted_total", "Ratings submitted", ["stars"])
