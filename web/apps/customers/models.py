from django.db import models


class CustomerModel(models.Model):
    class Kind(models.TextChoices):
        PRIVATE = "P"
        BUSINESS = "F"

    last_name = models.CharField(max_length=32)
    first_name = models.CharField(max_length=32, blank=True, default="")
    email = models.EmailField(max_length=128, unique=True)
    kind = models.CharField(max_length=1, choices=Kind.choices, default=Kind.PRIVATE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self):
        return f"CustomerModel(id={self.id}, email={self.email})"
