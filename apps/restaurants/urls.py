from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'restaurants'

router = SimpleRouter()
router.register(r'', views.RestaurantViewSet, basename='restaurant')

urlpatterns = [
    # GET /restaurants/       - Search restaurants
    # GET /restaurants/{id}/  - Restaurant page
    path('', include(router.urls)),
]
