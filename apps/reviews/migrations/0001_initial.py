import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('categories', '0001_initial'),
        ('users', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('review_id', models.AutoField(primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=255)),
                ('review_body', models.TextField()),
                ('designer', models.CharField(blank=True, max_length=255)),
                ('review_img_url', models.URLField(default='https://images.pexels.com/photos/163064/play-activity-board-game-163064.jpeg?w=700&h=700', max_length=1000)),
                ('votes', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('category', models.ForeignKey(db_column='category', on_delete=django.db.models.deletion.PROTECT, related_name='reviews', to='categories.category')),
                ('owner', models.ForeignKey(db_column='owner', on_delete=django.db.models.deletion.CASCADE, related_name='reviews', to='users.user')),
            ],
            options={
                'db_table': 'reviews',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['category', 'created_at'], name='reviews_category_created_idx'),
                    models.Index(fields=['created_at'], name='reviews_created_at_idx'),
                    models.Index(fields=['votes'], name='reviews_votes_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Comment',
            fields=[
                ('comment_id', models.AutoField(primary_key=True, serialize=False)),
                ('body', models.TextField()),
                ('votes', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('author', models.ForeignKey(db_column='author', on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='users.user')),
                ('review', models.ForeignKey(db_column='review_id', on_delete=django.db.models.deletion.CASCADE, related_name='comments', to='reviews.review')),
            ],
            options={
                'db_table': 'comments',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['review', 'created_at'], name='comments_review_created_idx'),
                ],
            },
        ),
    ]
