from django.urls import path

from .views import OrderCustomerView, OrdersCollectionView, RetrieveOrderView

app_name = "orders"

urlpatterns = [
    path("orders", OrdersCollectionView.as_view(), name="orders-collection"),  # GET list / POST create
    path("orders/<int:pk>", RetrieveOrderView.as_view(), name="orders-detail"),
    path("orders/<int:pk>/customer", OrderCustomerView.as_view(), name="orders-customer"),
]
