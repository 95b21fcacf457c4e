"""Request Logging — one access log line per handled request."""

import logging


async def test_request_logged_with_status(client, caplog):
    with caplog.at_level(logging.INFO, logger="blogposts.access"):
        await client.delete("/blog-posts/anything")
    access = [r for r in caplog.records if r.name == "blogposts.access"]
    assert len(access) == 1
    assert access[0].status_code == 204
    assert access[0].path == "/blog-posts/anything"
    assert access[0].method == "DELETE"


async def test_validation_failure_logged_with_error_code(client, caplog):
    with caplog.at_level(logging.ERROR, logger="blogposts.api.error_handlers"):
        await client.post("/blog-posts", json={"title": "t"})
    errors = [
        r for r in caplog.records if r.name == "blogposts.api.error_handlers"
    ]
    assert errors[0].error_code == "MISSING_FIELD"
    assert errors[0].path == "/blog-posts"
