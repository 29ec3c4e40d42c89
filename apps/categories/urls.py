from django.urls import re_path
from . import views

app_name = 'categories'

urlpatterns = [
    # GET    /api/categories/  - List categories
    # POST   /api/categories/  - Create category
    re_path(r'^/?$', views.category_list, name='category-list'),
]
