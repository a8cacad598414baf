from django.urls import path
from . import views

app_name = "reviews"

urlpatterns = [
    path("functions/v1/review-code", views.ReviewCodeView.as_view(), name="review_code"),
    path("functions/v1/generate-tests", views.GenerateTestsView.as_view(), name="generate_tests"),
    path("api/reviews/", views.history, name="history"),
    path("api/reviews/<uuid:pk>/", views.detail, name="detail"),
]
