from django.db import models


class ArticleModel(models.Model):
    name = models.CharField(max_length=32, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "articles"
        ordering = ["id"]

    def __str__(self):
        return f"ArticleModel(id={self.id}, name={self.name})"
