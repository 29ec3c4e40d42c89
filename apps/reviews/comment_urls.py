from django.urls import re_path
from . import views

app_name = 'comments'

urlpatterns = [
    # PATCH  /api/comments/{id}/  - Change votes
    # DELETE /api/comments/{id}/  - Delete comment
    re_path(r'^/(?P<comment_id>[^/]+)/?$', views.comment_detail, name='comment-detail'),
]
