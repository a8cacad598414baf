import json
from unittest import mock


REVIEW_PAYLOAD = {
    "findings": [
        {
            "type": "bug",
            "severity": "error",
            "line": 1,
            "message": "Division by zero",
            "suggestion": "Guard divisor",
        }
    ],
    "summary": "One bug found.",
    "score": 40,
    "rewritten_code": "def f(x):\n  if x==0: raise ValueError()\n  return x/0",
}

TESTS_PAYLOAD = {
    "test_cases": [
        {
            "name": "divides by one",
            "description": "Dividing by one returns the input",
            "input": "f(1)",
            "expected_output": "ZeroDivisionError",
            "type": "unit",
        },
        {
            "name": "zero input",
            "description": "Zero raises",
            "input": "f(0)",
            "expected_output": "ValueError",
            "type": "edge",
        },
    ]
}


def tool_call_reply(name, arguments):
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {
        "choices": [
            {
                "message": {
                    "role": "assistant",
                    "tool_calls": [
                        {"id": "call_1", "type": "function", "function": {"name": name, "arguments": arguments}}
                    ],
                }
            }
        ]
    }


def make_response(status_code=200, payload=None, text=None):
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text if text is not None else json.dumps(payload)
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


def post_json(client, url, body):
    return client.post(url, data=json.dumps(body), content_type="application/json")
