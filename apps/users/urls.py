from django.urls import re_path
from . import views

app_name = 'users'

urlpatterns = [
    # GET    /api/users/             - List users
    # GET    /api/users/{username}/  - Get user
    re_path(r'^/?$', views.user_list, name='user-list'),
    re_path(r'^/(?P<username>[^/]+)/?$', views.user_detail, name='user-detail'),
]
