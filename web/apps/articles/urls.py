from django.urls import path

from .views import ArticlesCollectionView, RetrieveArticleView

app_name = "articles"

urlpatterns = [
    path("articles", ArticlesCollectionView.as_view(), name="articles-collection"),  # POST create / PUT update
    path("articles/<int:pk>", RetrieveArticleView.as_view(), name="articles-detail"),
]
