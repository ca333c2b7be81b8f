from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ArticleViewSet

app_name = 'articles'

router = SimpleRouter(trailing_slash=False)
router.register(r'article', ArticleViewSet, basename='article')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/article              - List articles (?category=, ?isAvailable=)
# POST   /api/article              - Create article
# GET    /api/article/{id}         - Get article detail
# PUT    /api/article/{id}         - Update article
# PATCH  /api/article/{id}         - Update article
# DELETE /api/article/{id}         - Delete article
