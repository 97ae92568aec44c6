import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Stock',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('item', models.CharField(max_length=255, unique=True)),
                ('expected_count', models.IntegerField(default=0)),
                ('detected_count', models.IntegerField(default=0)),
            ],
        ),
    ]
