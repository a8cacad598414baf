# reviews/views.py
import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.http import require_GET

from .forms import ReviewRequestForm, TestGenerationForm
from .http import cors_endpoint, error_response, read_json_body
from .llm_client import GatewayClient, GatewayConfig, GatewayError
from .models import CodeReview
from .services import PersistenceError, generate_test_cases, submit_review
from .utils import rewrite_patch, rewrite_unified_diff, snippet_filename

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"


@method_decorator(cors_endpoint, name="dispatch")
class GatewayEndpoint(View):
    """POST endpoint backed by the AI gateway.

    ``config`` or ``client`` can be passed to ``as_view()``; otherwise the
    client is built from Django settings on each request.
    """

    http_method_names = ["post", "options"]
    form_class = None
    config = None
    client = None
    log_name = "endpoint"

    def get_client(self) -> GatewayClient:
        if self.client is not None:
            return self.client
        return GatewayClient(self.config or GatewayConfig.from_settings())

    def post(self, request):
        data = read_json_body(request)
        form = self.form_class(data or {})
        if data is None or not form.is_valid():
            return error_response(MISSING_FIELDS, 400)

        try:
            return JsonResponse(self.handle(self.get_client(), form.cleaned_data))
        except (GatewayError, PersistenceError) as e:
            if e.status_code == 500:
                logger.error("%s error: %s", self.log_name, e)
            return error_response(str(e), e.status_code)
        except Exception as e:
            logger.exception("%s error", self.log_name)
            return error_response(str(e) or "Unknown error", 500)

    def handle(self, client, params):
        raise NotImplementedError


class ReviewCodeView(GatewayEndpoint):
    form_class = ReviewRequestForm
    log_name = "review-code"

    def handle(self, client, params):
        review, result = submit_review(
            client,
            code=params["code"],
            language=params["language"],
            review_type=params["reviewType"],
            user_id=params["userId"],
        )
        return {"reviewId": str(review.id), **result.to_json()}


class GenerateTestsView(GatewayEndpoint):
    form_class = TestGenerationForm
    log_name = "generate-tests"

    def handle(self, client, params):
        return generate_test_cases(client, code=params["code"], language=params["language"]).to_json()


@cors_endpoint
@require_GET
def history(request):
    user_id = request.GET.get("user_id", "")
    if not user_id:
        return error_response(MISSING_FIELDS, 400)
    reviews = CodeReview.objects.for_user(user_id).values(
        "id", "language", "review_type", "score", "created_at"
    )[: settings.HISTORY_LIMIT]
    return JsonResponse({"reviews": list(reviews)})


@cors_endpoint
@require_GET
def detail(request, pk):
    review = CodeReview.objects.filter(id=pk).first()
    if review is None:
        return error_response("Review not found", 404)
    filename = snippet_filename(review.language)
    return JsonResponse(
        {
            "id": review.id,
            "user_id": review.user_id,
            "language": review.language,
            "review_type": review.review_type,
            "original_code": review.original_code,
            "rewritten_code": review.rewritten_code,
            "score": review.score,
            "created_at": review.created_at,
            "summary": review.summary,
            "findings": review.finding_list,
            "stats": {
                "severity_counts": review.severity_counts,
                "type_counts": review.type_counts,
                "quality_dimensions": review.quality_dimensions,
                "lines_of_code": review.lines_of_code,
            },
            "diff": rewrite_unified_diff(review.original_code, review.rewritten_code, filename=filename),
            "patch": rewrite_patch(review.original_code, review.rewritten_code),
        }
    )
