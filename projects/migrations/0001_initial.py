from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Project",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("date", models.CharField(help_text="Free text, e.g. 'March 2024'", max_length=50)),
                ("category", models.CharField(max_length=100)),
                ("description", models.TextField()),
                ("image", models.CharField(max_length=500)),
                ("tags", models.JSONField(blank=True, default=list)),
                ("link", models.CharField(blank=True, default="#", max_length=500)),
                ("featured", models.BooleanField(default=False)),
                ("status", models.CharField(
                    choices=[
                        ("active", "Active"),
                        ("upcoming", "Upcoming"),
                        ("completed", "Completed"),
                        ("archived", "Archived"),
                    ],
                    default="completed",
                    max_length=10,
                )),
                ("order", models.IntegerField(default=0)),
            ],
            options={"ordering": ["order", "-created_at"]},
        ),
        migrations.AddIndex(
            model_name="project",
            index=models.Index(fields=["order", "created_at"], name="projects_pr_order_3c1f0e_idx"),
        ),
        migrations.AddIndex(
            model_name="project",
            index=models.Index(fields=["featured", "status"], name="projects_pr_feature_8d2a41_idx"),
        ),
        migrations.CreateModel(
            name="ProjectReport",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("reporter_name", models.CharField(max_length=150)),
                ("reporter_email", models.EmailField(max_length=254)),
                ("category", models.CharField(max_length=100)),
                ("project_url", models.URLField(max_length=500)),
                ("status", models.CharField(
                    choices=[
                        ("new", "New"),
                        ("reviewing", "Reviewing"),
                        ("approved", "Approved"),
                        ("featured", "Featured"),
                        ("rejected", "Rejected"),
                    ],
                    db_index=True,
                    default="new",
                    max_length=10,
                )),
                ("admin_notes", models.TextField(blank=True)),
            ],
            options={"ordering": ["-created_at"], "verbose_name": "project report"},
        ),
    ]
