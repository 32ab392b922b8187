from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('clinic', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='user',
            name='reset_attempts',
            field=models.PositiveSmallIntegerField(default=0),
        ),
    ]
