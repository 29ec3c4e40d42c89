from django.urls import re_path
from . import views

app_name = 'reviews'

urlpatterns = [
    # GET    /api/reviews/                 - List reviews (sort_by, order_by, category, limit, p)
    # POST   /api/reviews/                 - Create review
    re_path(r'^/?$', views.review_list, name='review-list'),

    # GET    /api/reviews/{id}/            - Get review with comment_count
    # PATCH  /api/reviews/{id}/            - Change votes
    # DELETE /api/reviews/{id}/            - Delete review
    re_path(r'^/(?P<review_id>[^/]+)/?$', views.review_detail, name='review-detail'),

    # GET    /api/reviews/{id}/comments/   - List comments
    # POST   /api/reviews/{id}/comments/   - Post comment
    re_path(r'^/(?P<review_id>[^/]+)/comments/?$', views.review_comments, name='review-comments'),
]
