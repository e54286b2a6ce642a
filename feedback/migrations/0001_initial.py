import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Feedback",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("role", models.CharField(blank=True, max_length=150)),
                ("workplace", models.CharField(blank=True, max_length=150)),
                ("comment", models.TextField()),
                ("rating", models.PositiveSmallIntegerField(validators=[
                    django.core.validators.MinValueValidator(1),
                    django.core.validators.MaxValueValidator(5),
                ])),
                ("featured", models.BooleanField(db_index=True, default=False)),
            ],
            options={
                "ordering": ["-featured", "-created_at"],
                "verbose_name": "feedback",
                "verbose_name_plural": "feedback",
            },
        ),
    ]
