from django.urls import path

from .views import CustomersCollectionView, CustomerDetailView

app_name = "customers"

urlpatterns = [
    path("customers", CustomersCollectionView.as_view(), name="customers-collection"),  # POST create, PUT update
    path("customers/<int:pk>", CustomerDetailView.as_view(), name="customers-detail"),
]
