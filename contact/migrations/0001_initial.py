from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ContactMessage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("subject", models.CharField(max_length=255)),
                ("message", models.TextField()),
                ("status", models.CharField(
                    choices=[("unread", "Unread"), ("read", "Read"), ("replied", "Replied")],
                    db_index=True,
                    default="unread",
                    max_length=10,
                )),
                ("admin_response", models.TextField(blank=True)),
            ],
            options={"ordering": ["-created_at"], "verbose_name": "contact message"},
        ),
    ]
