from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CustomerModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("last_name", models.CharField(max_length=32)),
                ("first_name", models.CharField(blank=True, default="", max_length=32)),
                ("email", models.EmailField(max_length=128, unique=True)),
                (
                    "kind",
                    models.CharField(choices=[("P", "Private"), ("F", "Business")], default="P", max_length=1),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "customers",
                "ordering": ["id"],
            },
        ),
    ]
