from django.apps import AppConfig


class CategoriesConfig(AppConfig):
    name = 'apps.categories'
    label = 'categories'
    default_auto_field = 'django.db.models.BigAutoField'
