from django.db import models


class OrderModel(models.Model):
    customer = models.ForeignKey(
        "customers.CustomerModel",
        on_delete=models.PROTECT,
        related_name="orders",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at", "-id"]


class OrderLineModel(models.Model):
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name="lines")
    article = models.ForeignKey("articles.ArticleModel", on_delete=models.PROTECT, related_name="+")
    quantity = models.PositiveIntegerField(default=1)
    # Position of the line within the order, keeps request order
    position = models.PositiveIntegerField()

    class Meta:
        db_table = "order_lines"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["order", "position"], name="uniq_order_line_position"),
        ]
