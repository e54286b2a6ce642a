"""
Views for the contact app: the public form and the admin inbox.
"""
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, mixins, viewsets

from common.permissions import IsStaffOrSuperuser
from common.views import ClearAllMixin, SubmissionCreateView
from .models import ContactMessage
from .serializers import ContactMessageSerializer, ContactSubmissionSerializer


class ContactCreateView(SubmissionCreateView):
    serializer_class = ContactSubmissionSerializer
    success_message = "Thank you for your message! We will get back to you soon."


class AdminContactViewSet(
    ClearAllMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    queryset = ContactMessage.objects.all().order_by("-created_at")
    serializer_class = ContactMessageSerializer
    permission_classes = [IsStaffOrSuperuser]
    filterset_fields = ["status"]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter]
    search_fields = ["name", "email", "subject", "message"]
    clear_message = "All contacts cleared successfully"
