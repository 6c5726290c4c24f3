"""WSGI adapter so any WSGI server can host the submit endpoint."""

from __future__ import annotations

from http import HTTPStatus

from order_intake.infrastructure.web.endpoint import SubmitOrderEndpoint


def make_wsgi_app(endpoint: SubmitOrderEndpoint):
    def app(environ, start_response):
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""

        response = endpoint.handle(environ.get("REQUEST_METHOD", "GET"), body)
        payload = response.body()

        status = HTTPStatus(response.status)
        headers = list(response.headers.items())
        headers.append(("Content-Length", str(len(payload))))
        start_response(f"{status.value} {status.phrase}", headers)
        return [payload]

    return app
