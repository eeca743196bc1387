from django.urls import path
from . import views

app_name = 'reviews'

review_list = views.ReviewViewSet.as_view({'get': 'list', 'post': 'store'})
review_create = views.ReviewViewSet.as_view({'get': 'create'})
review_edit = views.ReviewViewSet.as_view({'get': 'edit'})
review_detail = views.ReviewViewSet.as_view({
    'put': 'update',
    'patch': 'update',
    'delete': 'destroy',
})

# Mounted under /restaurants/<restaurant_pk>/reviews/
urlpatterns = [
    # GET    .../reviews/              - List reviews
    # POST   .../reviews/              - Post a review
    # GET    .../reviews/create/       - Post-review form
    # GET    .../reviews/{id}/edit/    - Edit form
    # PATCH  .../reviews/{id}/         - Update review
    # DELETE .../reviews/{id}/         - Delete review
    path('', review_list, name='review-list'),
    path('create/', review_create, name='review-create'),
    path('<uuid:pk>/edit/', review_edit, name='review-edit'),
    path('<uuid:pk>/', review_detail, name='review-detail'),
]
