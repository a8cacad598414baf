from django.contrib import admin

from .models import CodeReview


@admin.register(CodeReview)
class CodeReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "language", "review_type", "score", "created_at")
    list_filter = ("language", "review_type")
    search_fields = ("user_id",)
    ordering = ("-created_at",)

    # Reviews are immutable once stored.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
