# reviews/services.py
import logging

from django.db import DatabaseError, transaction

from .llm_client import GatewayClient
from .models import CodeReview
from .schemas import ReviewResult, TestSuite

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    status_code = 500

    def __init__(self, message="Failed to save review"):
        super().__init__(message)


def save_review(user_id: str, language: str, review_type: str, code: str, result: ReviewResult) -> CodeReview:
    payload = result.to_json()
    try:
        with transaction.atomic():
            return CodeReview.objects.create(
                user_id=user_id,
                language=language,
                review_type=review_type,
                original_code=code,
                findings={"findings": payload["findings"], "summary": payload["summary"]},
                rewritten_code=result.rewritten_code,
                score=result.stored_score,
            )
    except DatabaseError as e:
        logger.error("DB error: %s", e)
        raise PersistenceError() from e


def submit_review(client: GatewayClient, code: str, language: str, review_type: str, user_id: str):
    """Run one review through the gateway and store it. Returns ``(review, result)``."""
    logger.info("Review requested: language=%s review_type=%s chars=%d", language, review_type, len(code))
    result = client.review(code, language, review_type)
    review = save_review(user_id, language, review_type, code, result)
    logger.info("Review %s saved (score=%s, findings=%d)", review.id, review.score, len(result.findings))
    return review, result


def generate_test_cases(client: GatewayClient, code: str, language: str) -> TestSuite:
    logger.info("Test generation requested: language=%s chars=%d", language, len(code))
    suite = client.generate_tests(code, language)
    logger.info("Generated %d test cases", len(suite.test_cases))
    return suite
