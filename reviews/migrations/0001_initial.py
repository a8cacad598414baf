import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CodeReview",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_id", models.TextField(db_index=True)),
                ("language", models.TextField()),
                ("review_type", models.TextField(default="all")),
                ("original_code", models.TextField()),
                ("findings", models.JSONField(default=dict)),
                ("rewritten_code", models.TextField(blank=True, default="")),
                (
                    "score",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ]
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "code_reviews",
                "ordering": ["-created_at"],
            },
        ),
    ]
