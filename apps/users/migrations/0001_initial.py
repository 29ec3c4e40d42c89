from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('username', models.CharField(max_length=100, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('avatar_url', models.URLField(blank=True, max_length=500)),
            ],
            options={
                'db_table': 'users',
                'ordering': ['username'],
            },
        ),
    ]
