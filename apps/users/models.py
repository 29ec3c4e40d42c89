# ==========================================
# apps/users/models.py
# ==========================================

from django.db import models


class User(models.Model):
    """
    Platform member who owns reviews and writes comments.

    Plain domain row keyed by username; the API has no login so this is
    not tied to django.contrib.auth.
    """

    username = models.CharField(max_length=100, primary_key=True)
    name = models.CharField(max_length=200)
    avatar_url = models.URLField(max_length=500, blank=True)

    class Meta:
        db_table = 'users'
        ordering = ['username']

    def __str__(self):
        return self.username
