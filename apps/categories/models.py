# ==========================================
# apps/categories/models.py
# ==========================================

from django.db import models


class Category(models.Model):
    """Board game category, addressed by its slug."""

    slug = models.CharField(max_length=100, primary_key=True)
    description = models.TextField(blank=True)

    class Meta:
        db_table = 'categories'
        ordering = ['slug']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.slug
