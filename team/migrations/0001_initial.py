from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="TeamMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                ("role", models.CharField(max_length=150)),
                ("image", models.CharField(max_length=500)),
                ("bio", models.TextField()),
                ("order", models.IntegerField(default=0)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={"ordering": ["order", "created_at"]},
        ),
        migrations.AddIndex(
            model_name="teammember",
            index=models.Index(fields=["order", "created_at"], name="team_member_order_idx"),
        ),
        migrations.CreateModel(
            name="TeamApplication",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(max_length=40)),
                ("linkedin", models.CharField(blank=True, max_length=300)),
                ("interest", models.CharField(max_length=200)),
                ("comment", models.TextField()),
                ("status", models.CharField(
                    choices=[
                        ("new", "New"),
                        ("reviewing", "Reviewing"),
                        ("accepted", "Accepted"),
                        ("rejected", "Rejected"),
                    ],
                    db_index=True,
                    default="new",
                    max_length=10,
                )),
                ("admin_notes", models.TextField(blank=True)),
            ],
            options={"ordering": ["-created_at"], "verbose_name": "team application"},
        ),
    ]
