# content/views.py
from django.shortcuts import render, redirect, get_object_or_404
from django.http import Http404
from django.views.decorators.http import require_http_methods, require_POST
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.core.paginator import Paginator
from django.conf import settings
import logging

from .models import Article, Category
from .forms import ArticleForm, CategoryForm
from .services.slugifier import slugifier

logger = logging.getLogger(__name__)


def paginate(request, queryset):
    paginator = Paginator(queryset, settings.ARTICLES_PER_PAGE)
    return paginator.get_page(request.GET.get('page'))


# ==================== PUBLIC PAGES ====================

@require_http_methods(["GET"])
def index(request):
    """Published articles, newest first"""
    articles = Article.objects.published().select_related('author', 'category')
    return render(request, 'index.html', {
        'page': paginate(request, articles),
        'categories': Category.objects.all(),
    })


@require_http_methods(["GET"])
def article_detail(request, slug):
    article = get_object_or_404(Article.objects.select_related('author', 'category'), slug=slug)

    # Drafts are only visible to the people who can edit them
    if not article.is_published and not can_edit(request.user, article):
        raise Http404("No Article matches the given query.")

    return render(request, 'article.html', {'article': article})


@require_http_methods(["GET"])
def category_articles(request, slug):
    category = get_object_or_404(Category, slug=slug)
    articles = category.articles.published().select_related('author')
    return render(request, 'category.html', {
        'category': category,
        'page': paginate(request, articles),
    })


# ==================== MANAGEMENT ====================

def can_edit(user, article):
    if not user.is_authenticated:
        return False
    return user.is_staff or article.author_id == user.id


def get_editable_article(request, pk):
    article = get_object_or_404(Article, pk=pk)
    if not can_edit(request.user, article):
        logger.warning(f"User {request.user.username} tried to modify article {pk} without permission")
        raise Http404("No Article matches the given query.")
    return article


@login_required
def manage(request):
    """All articles the current user can edit, drafts included"""
    articles = Article.objects.select_related('category', 'author').order_by('-updated_at')
    if not request.user.is_staff:
        articles = articles.filter(author=request.user)

    return render(request, 'manage.html', {
        'articles': articles,
        'draft_count': articles.filter(published_at__isnull=True).count(),
    })


@login_required
@require_http_methods(["GET", "POST"])
def article_create(request):
    if request.method == 'POST':
        form = ArticleForm(request.POST)
        if form.is_valid():
            article = form.save(commit=False)
            article.author = request.user
            article.slug = slugifier.unique_slug(article.title, Article)
            article.save()
            logger.info(f"Article {article.pk} '{article.slug}' created by {request.user.username}")
            messages.success(request, 'Draft saved')
            return redirect('content:article_edit', pk=article.pk)
    else:
        form = ArticleForm()

    return render(request, 'editor.html', {'form': form, 'article': None})


@login_required
@require_http_methods(["GET", "POST"])
def article_edit(request, pk):
    article = get_editable_article(request, pk)

    if request.method == 'POST':
        form = ArticleForm(request.POST, instance=article)
        if form.is_valid():
            article = form.save(commit=False)
            # Published links must keep working, so only drafts follow their title
            if not article.is_published and 'title' in form.changed_data:
                article.slug = slugifier.unique_slug(article.title, Article, exclude_pk=article.pk)
            article.save()
            messages.success(request, 'Article saved')
            return redirect('content:article_edit', pk=article.pk)
    else:
        form = ArticleForm(instance=article)

    return render(request, 'editor.html', {'form': form, 'article': article})


@login_required
@require_POST
def article_publish(request, pk):
    article = get_editable_article(request, pk)
    if not article.is_published:
        article.publish()
        logger.info(f"Article {article.pk} '{article.slug}' published by {request.user.username}")
        messages.success(request, f'"{article.title}" is now live')
    return redirect('content:manage')


@login_required
@require_POST
def article_unpublish(request, pk):
    article = get_editable_article(request, pk)
    if article.published_at is not None:
        article.unpublish()
        logger.info(f"Article {article.pk} '{article.slug}' unpublished by {request.user.username}")
        messages.info(request, f'"{article.title}" was moved back to drafts')
    return redirect('content:manage')


@login_required
@require_POST
def article_delete(request, pk):
    article = get_editable_article(request, pk)
    title = article.title
    article.delete()
    logger.info(f"Article {pk} deleted by {request.user.username}")
    messages.info(request, f'"{title}" was deleted')
    return redirect('content:manage')


@login_required
@require_http_methods(["GET", "POST"])
def categories(request):
    if request.method == 'POST':
        form = CategoryForm(request.POST)
        if form.is_valid():
            category = form.save(commit=False)
            category.slug = slugifier.unique_slug(category.title, Category)
            category.save()
            messages.success(request, f'Category "{category.title}" created')
            return redirect('content:categories')
    else:
        form = CategoryForm()

    return render(request, 'categories.html', {
        'form': form,
        'categories': Category.objects.all(),
    })
