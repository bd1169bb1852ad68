# content/templatetags/markdown_filters.py
import logging

import mistune
from django import template
from django.utils.html import escape
from django.utils.safestring import mark_safe

logger = logging.getLogger(__name__)

register = template.Library()

# escape=True so raw HTML typed into the editor is shown, never executed
render = mistune.create_markdown(escape=True, plugins=['strikethrough', 'table', 'url'])


@register.filter(name='markdown')
def render_markdown(body):
    """Render an article body to HTML for {{ article.body|markdown }}."""
    if not body:
        return ''

    try:
        return mark_safe(render(str(body)))
    except Exception as e:
        logger.warning(f"Could not render article markdown, showing plain text: {e}")
        return mark_safe(f'<p>{escape(body)}</p>')
