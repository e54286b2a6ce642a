"""
Initial migration for the videos app.

Creates ``HeroVideo`` and the partial unique constraint that allows a
single active video per category.
"""
from django.db import migrations, models

import videos.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="HeroVideo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("category", models.CharField(
                    choices=[("desktop", "Desktop"), ("mobile", "Mobile")],
                    db_index=True,
                    max_length=10,
                )),
                ("file", models.FileField(max_length=500, upload_to=videos.models.hero_video_upload_path)),
                ("original_name", models.CharField(blank=True, max_length=255)),
                ("size", models.PositiveBigIntegerField(default=0)),
                ("mime_type", models.CharField(blank=True, max_length=100)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.AddConstraint(
            model_name="herovideo",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_active", True)),
                fields=("category",),
                name="one_active_video_per_category",
            ),
        ),
    ]
