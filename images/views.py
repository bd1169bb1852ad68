from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.parsers import MultiPartParser, FormParser
import logging

from .services.image_service import image_service, InvalidImageError

logger = logging.getLogger(__name__)


class ImageUploadAPIView(APIView):
    """Receives images pasted or dropped into the editor"""
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        upload = request.FILES.get("file")

        if not upload:
            return Response({"error": "File is required"}, status=400)

        try:
            image = image_service.store(upload, request.user)
        except InvalidImageError as e:
            logger.warning(f"Rejected image upload from {request.user.username}: {e}")
            return Response({"error": str(e)}, status=400)

        return Response({"url": image.url})
