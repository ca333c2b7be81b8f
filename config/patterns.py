"""URL patterns shared by the API routers."""

# Matches the lookup segment of detail routes; anything else is a 404
UUID_PATTERN = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'
