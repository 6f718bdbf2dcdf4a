# Shared service-layer and API helpers for the Bazaar backend
