from django.urls import path

from accounts.handlers import LoginView, SignupView

urlpatterns = [
    path("signup", SignupView.as_view(), name="user-signup"),
    path("login", LoginView.as_view(), name="user-login"),
]
