from django.urls import path
from . import views

app_name = 'subscriptions'

subscription = views.SubscriptionViewSet.as_view({
    'get': 'show',
    'post': 'store',
    'delete': 'cancel',
})
subscription_create = views.SubscriptionViewSet.as_view({'get': 'create'})

urlpatterns = [
    # GET    /subscription/create/  - Premium plan page
    # POST   /subscription/         - Subscribe
    # GET    /subscription/         - Current subscription
    # DELETE /subscription/         - Cancel
    path('create/', subscription_create, name='create'),
    path('', subscription, name='detail'),
]
