from django.urls import path
from .views import ImageUploadAPIView

app_name = "images"

urlpatterns = [
    path("api/images", ImageUploadAPIView.as_view(), name="upload_api"),
]
