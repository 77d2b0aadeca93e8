import uuid

from django.db import migrations, models

import apps.exchange.infrastructure.persistence.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ConversionTransaction",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("transaction_id", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("original_amount", apps.exchange.infrastructure.persistence.fields.DecimalTextField()),
                ("from_currency", models.CharField(max_length=16)),
                ("to_currency", models.CharField(max_length=16)),
                ("rate", models.FloatField(blank=True, null=True)),
                ("converted_amount", apps.exchange.infrastructure.persistence.fields.DecimalTextField()),
                ("date_time", models.DateTimeField(db_index=True, editable=False)),
            ],
            options={
                "ordering": ["-date_time"],
            },
        ),
    ]
