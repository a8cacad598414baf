import uuid
from collections import Counter

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class ImmutableReviewError(Exception):
    pass


class CodeReviewQuerySet(models.QuerySet):
    def for_user(self, user_id):
        return self.filter(user_id=user_id).order_by("-created_at")


class CodeReview(models.Model):
    """One stored review submission. Written once, never updated."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Account id issued by the external auth service.
    user_id = models.TextField(db_index=True)
    language = models.TextField()
    review_type = models.TextField(default="all")
    original_code = models.TextField()
    findings = models.JSONField(default=dict)
    rewritten_code = models.TextField(blank=True, default="")
    score = models.PositiveSmallIntegerField(validators=[MinValueValidator(0), MaxValueValidator(100)])
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CodeReviewQuerySet.as_manager()

    class Meta:
        db_table = "code_reviews"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Review {self.id} [{self.language}] {self.score}/100"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableReviewError(f"Review {self.id} is immutable")
        super().save(*args, **kwargs)

    @property
    def summary(self):
        return (self.findings or {}).get("summary", "")

    @property
    def finding_list(self):
        return (self.findings or {}).get("findings", [])

    @property
    def severity_counts(self):
        counts = Counter(f.get("severity") for f in self.finding_list)
        return {s: counts.get(s, 0) for s in ("error", "warning", "info")}

    @property
    def type_counts(self):
        counts = Counter(f.get("type") for f in self.finding_list)
        return {t: counts.get(t, 0) for t in ("bug", "security", "performance", "style")}

    @property
    def quality_dimensions(self):
        t = self.type_counts
        return {
            "security": max(0, 100 - t["security"] * 20),
            "performance": max(0, 100 - t["performance"] * 15),
            "readability": max(0, 100 - t["style"] * 10),
            "reliability": max(0, 100 - t["bug"] * 25),
            "maintainability": min(100, self.score + 10),
        }

    @property
    def lines_of_code(self):
        return len(self.original_code.splitlines())
