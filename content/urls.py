from django.urls import path
from . import views

app_name = "content"

urlpatterns = [
    # Public pages
    path('', views.index, name='index'),
    path('articles/<slug:slug>/', views.article_detail, name='article'),
    path('categories/<slug:slug>/', views.category_articles, name='category'),

    # Management
    path('manage/', views.manage, name='manage'),
    path('manage/articles/new/', views.article_create, name='article_create'),
    path('manage/articles/<int:pk>/edit/', views.article_edit, name='article_edit'),
    path('manage/articles/<int:pk>/publish/', views.article_publish, name='article_publish'),
    path('manage/articles/<int:pk>/unpublish/', views.article_unpublish, name='article_unpublish'),
    path('manage/articles/<int:pk>/delete/', views.article_delete, name='article_delete'),
    path('manage/categories/', views.categories, name='categories'),
]
