import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('inventory', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Activity',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('kind', models.CharField(choices=[('login', 'Login'), ('count', 'Count')], max_length=10)),
                ('action', models.CharField(max_length=255)),
                ('counted_amount', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('stock', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='activities', to='inventory.stock')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='activities', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'activities',
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(('kind', 'login'), ('stock__isnull', True)),
                            models.Q(('kind', 'count'), ('stock__isnull', False)),
                            _connector='OR',
                        ),
                        name='activity_stock_matches_kind',
                    ),
                ],
            },
        ),
    ]
