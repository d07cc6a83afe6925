from app.utils.response import success_response, error_response


def test_success_response_with_payload():
    result = success_response({"key": "value"})
    assert result == {"response": {"key": "value"}, "success": True}


def test_success_response_with_list():
    assert success_response([]) == {"response": [], "success": True}


def test_error_response():
    result = error_response("Please, log in")
    assert result == {"response": "Please, log in", "success": False}
