# users/migrations/0002_user_hearts.py

from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("stores", "0001_initial"),
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="user",
            name="hearts",
            field=models.ManyToManyField(
                blank=True,
                related_name="hearted_by",
                to="stores.store",
            ),
        ),
    ]
