from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'communities'

# Router for ViewSets, mounted under /api/
router = SimpleRouter(trailing_slash=False)
router.register(r'community', views.CommunityViewSet, basename='community')

urlpatterns = [
    # Community ViewSet routes
    # GET    /api/community                    - List communities
    # POST   /api/community                    - Create community
    # GET    /api/community/{id}               - Get community details

    # Custom community actions
    # POST   /api/community/{id}/join          - Join community
    # POST   /api/community/{id}/leave         - Leave community
    # GET    /api/community/{id}/members       - List members
    # PUT    /api/community/{id}/preferences   - Override delivery preferences
    # POST   /api/community/{id}/vote          - Vote for delivery time
    # GET    /api/community/{id}/votes         - Preferences and votes

    # Include router URLs
    path('', include(router.urls)),
]
