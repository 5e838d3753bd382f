from django.urls import include, path

urlpatterns = [
    path("api/", include("apps.customers.urls")),
    path("api/", include("apps.articles.urls")),
    path("api/", include("apps.orders.urls")),
]
