import pytest

from reviews.prompts import (
    GENERATE_TESTS_TOOL,
    SUGGEST_REVIEW_TOOL,
    build_chat_payload,
    build_review_messages,
    build_test_messages,
    fence_code,
    review_focus,
)


@pytest.mark.parametrize(
    "review_type, expected",
    [
        ("all", "code quality, security vulnerabilities, and performance issues"),
        ("quality", "code quality, bugs, and style issues"),
        ("security", "security vulnerabilities and unsafe patterns"),
        ("performance", "performance bottlenecks and optimization opportunities"),
        ("nonsense", "performance bottlenecks and optimization opportunities"),
    ],
)
def test_review_focus(review_type, expected):
    assert review_focus(review_type) == expected


def test_fence_code_uses_lowercased_language_tag():
    assert fence_code("x = 1", "Python") == "```python\nx = 1\n```"


def test_review_messages_name_language_and_focus():
    system, user = build_review_messages("let a = 1;", "JavaScript", "security")
    assert system["role"] == "system"
    assert "JavaScript code focusing on security vulnerabilities and unsafe patterns" in system["content"]
    assert "suggest_review" in system["content"]
    assert user == {"role": "user", "content": "Review this JavaScript code:\n\n```javascript\nlet a = 1;\n```"}


def test_test_messages():
    system, user = build_test_messages("fn main() {}", "Rust")
    assert "Generate comprehensive test cases for the given Rust code" in system["content"]
    assert user["content"].endswith("```rust\nfn main() {}\n```")


def test_chat_payload_forces_the_tool():
    payload = build_chat_payload("some-model", [], SUGGEST_REVIEW_TOOL)
    assert payload["model"] == "some-model"
    assert payload["tools"] == [SUGGEST_REVIEW_TOOL]
    assert payload["tool_choice"] == {"type": "function", "function": {"name": "suggest_review"}}


def test_tool_schemas_required_fields():
    review = SUGGEST_REVIEW_TOOL["function"]["parameters"]
    assert review["required"] == ["findings", "summary", "score", "rewritten_code"]
    assert review["properties"]["findings"]["items"]["required"] == ["type", "severity", "message", "suggestion"]

    tests = GENERATE_TESTS_TOOL["function"]["parameters"]
    item = tests["properties"]["test_cases"]["items"]
    assert item["required"] == ["name", "description", "input", "expected_output", "type"]
    assert item["properties"]["type"]["enum"] == ["unit", "edge", "integration", "boundary"]
