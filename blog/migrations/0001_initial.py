"""
Initial migration for the blog app.
"""
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BlogPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField()),
                ("author", models.CharField(max_length=150)),
                ("category", models.CharField(
                    choices=[
                        ("Web Security", "Web Security"),
                        ("Network Security", "Network Security"),
                        ("Penetration Testing", "Penetration Testing"),
                        ("Malware Analysis", "Malware Analysis"),
                        ("CTF", "CTF"),
                        ("Research", "Research"),
                        ("Tools", "Tools"),
                        ("Other", "Other"),
                    ],
                    db_index=True,
                    max_length=30,
                )),
                ("tags", models.JSONField(blank=True, default=list)),
                ("image_url", models.CharField(blank=True, max_length=500)),
                ("image_path", models.CharField(blank=True, help_text="Storage key of the uploaded cover image", max_length=500)),
                ("blog_url", models.URLField(
                    blank=True,
                    max_length=500,
                    validators=[django.core.validators.URLValidator(
                        message="Blog URL must be a valid HTTP/HTTPS URL", schemes=["http", "https"]
                    )],
                )),
                ("is_published", models.BooleanField(db_index=True, default=False)),
                ("is_featured", models.BooleanField(db_index=True, default=False)),
                ("read_time", models.PositiveIntegerField(default=5, help_text="Estimated minutes")),
                ("views", models.PositiveIntegerField(default=0)),
                ("likes", models.PositiveIntegerField(default=0)),
            ],
            options={"ordering": ["-created_at"], "verbose_name": "blog post"},
        ),
    ]
