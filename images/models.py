from django.db import models
from django.contrib.auth.models import User


class Image(models.Model):
    """An image uploaded from the editor and embedded in article markdown by URL"""
    file = models.ImageField(upload_to='images/%Y/%m/', width_field='width', height_field='height')
    original_name = models.CharField(max_length=255, blank=True)
    content_type = models.CharField(max_length=50)
    size = models.PositiveIntegerField(help_text="Size in bytes")
    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    uploaded_by = models.ForeignKey(
        User, on_delete=models.SET_NULL, null=True, blank=True, related_name='images'
    )
    uploaded_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.original_name or self.file.name

    @property
    def url(self):
        return self.file.url

    class Meta:
        verbose_name = "Image"
        verbose_name_plural = "Images"
        ordering = ['-uploaded_at']
