# reviews/prompts.py
LANGUAGES = ["Python", "JavaScript", "TypeScript", "Java", "C++", "Go", "Rust", "Ruby", "PHP", "C#"]

REVIEW_TYPES = ["all", "quality", "security", "performance"]

REVIEW_FOCUS = {
    "all": "code quality, security vulnerabilities, and performance issues",
    "quality": "code quality, bugs, and style issues",
    "security": "security vulnerabilities and unsafe patterns",
    "performance": "performance bottlenecks and optimization opportunities",
}


def review_focus(review_type: str) -> str:
    # Unknown review types fall back to the performance focus.
    return REVIEW_FOCUS.get(review_type, REVIEW_FOCUS["performance"])


def fence_code(code: str, language: str) -> str:
    return f"```{language.lower()}\n{code}\n```"


def review_system_prompt(language: str, review_type: str) -> str:
    return f"""You are an expert code reviewer. Analyze the given {language} code focusing on {review_focus(review_type)}.

Return a JSON response using the suggest_review tool with:
- findings: array of issues found, each with: type (bug|security|performance|style), severity (error|warning|info), line (number or null), message (what's wrong), suggestion (how to fix)
- summary: a 1-2 sentence overview of the code quality
- score: integer 0-100 rating the overall code quality
- rewritten_code: the improved/refactored version of the code

Be thorough but practical. Focus on real issues, not nitpicks."""


def tests_system_prompt(language: str) -> str:
    return (
        f"You are a test engineer. Generate comprehensive test cases for the given {language} code. "
        "Include unit tests, edge cases, boundary tests, and integration tests where applicable. "
        "Use the generate_tests tool to return structured results."
    )


def build_review_messages(code: str, language: str, review_type: str) -> list:
    return [
        {"role": "system", "content": review_system_prompt(language, review_type)},
        {"role": "user", "content": f"Review this {language} code:\n\n{fence_code(code, language)}"},
    ]


def build_test_messages(code: str, language: str) -> list:
    return [
        {"role": "system", "content": tests_system_prompt(language)},
        {"role": "user", "content": f"Generate test cases for this {language} code:\n\n{fence_code(code, language)}"},
    ]


SUGGEST_REVIEW_TOOL = {
    "type": "function",
    "function": {
        "name": "suggest_review",
        "description": "Return structured code review results",
        "parameters": {
            "type": "object",
            "properties": {
                "findings": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "type": {"type": "string", "enum": ["bug", "security", "performance", "style"]},
                            "severity": {"type": "string", "enum": ["error", "warning", "info"]},
                            "line": {"type": "number"},
                            "message": {"type": "string"},
                            "suggestion": {"type": "string"},
                        },
                        "required": ["type", "severity", "message", "suggestion"],
                        "additionalProperties": False,
                    },
                },
                "summary": {"type": "string"},
                "score": {"type": "number"},
                "rewritten_code": {"type": "string"},
            },
            "required": ["findings", "summary", "score", "rewritten_code"],
            "additionalProperties": False,
        },
    },
}

GENERATE_TESTS_TOOL = {
    "type": "function",
    "function": {
        "name": "generate_tests",
        "description": "Return structured test cases",
        "parameters": {
            "type": "object",
            "properties": {
                "test_cases": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string"},
                            "description": {"type": "string"},
                            "input": {"type": "string"},
                            "expected_output": {"type": "string"},
                            "type": {"type": "string", "enum": ["unit", "edge", "integration", "boundary"]},
                        },
                        "required": ["name", "description", "input", "expected_output", "type"],
                        "additionalProperties": False,
                    },
                },
            },
            "required": ["test_cases"],
            "additionalProperties": False,
        },
    },
}


def build_chat_payload(model: str, messages: list, tool: dict) -> dict:
    """Chat-completion body that forces the model to answer through ``tool``."""
    return {
        "model": model,
        "messages": messages,
        "tools": [tool],
        "tool_choice": {"type": "function", "function": {"name": tool["function"]["name"]}},
    }
