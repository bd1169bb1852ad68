# content/services/slugifier.py
import re

from django.utils.text import slugify as django_slugify

FALLBACK_SLUG = "untitled"


class Slugifier:
    """Turns titles into URL slugs that are unique for a model's ``slug`` field"""

    def __init__(self, max_length=200):
        self.max_length = max_length

    def slugify(self, text: str, max_length: int = None) -> str:
        # slugify already lowercases and drops accents; collapse what is left
        limit = max_length or self.max_length
        slug = django_slugify(text or "", allow_unicode=False)
        slug = re.sub(r"[-_]+", "-", slug).strip("-")
        slug = slug[:limit].rstrip("-")
        return slug or FALLBACK_SLUG

    def unique_slug(self, text: str, model, exclude_pk=None, field: str = "slug") -> str:
        # Compatibility decomposition can make a slug longer than its title
        limit = min(self.max_length, model._meta.get_field(field).max_length or self.max_length)
        base = self.slugify(text, limit)
        queryset = model._default_manager.all()
        if exclude_pk is not None:
            queryset = queryset.exclude(pk=exclude_pk)

        candidate = base
        counter = 2
        while queryset.filter(**{field: candidate}).exists():
            suffix = f"-{counter}"
            candidate = f"{base[:limit - len(suffix)].rstrip('-')}{suffix}"
            counter += 1
        return candidate


slugifier = Slugifier()
