"""URL configuration for the whitelist bot service."""

from django.urls import path

from . import views

urlpatterns = [
    path("bot/test", views.test, name="test"),
    path("bot/interactions", views.handle_interaction, name="interaction"),
]
