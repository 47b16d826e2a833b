# catalog/core/forms.py
import json

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


class FormBodyMiddleware:
    """
    Accept form submissions wherever the API expects a JSON body.

    A POST/PUT sent as multipart or urlencoded form is re-sent to the app
    as a JSON object of its text fields. Empty values and uploaded files
    are dropped. Everything else passes through untouched, so parsing and
    validation stay with FastAPI.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] not in ("POST", "PUT"):
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        if not request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPES):
            await self.app(scope, receive, send)
            return

        form = await request.form()
        fields = {
            key: value
            for key, value in form.items()
            if isinstance(value, str) and value != ""
        }
        await form.close()

        body = json.dumps(fields).encode()
        headers = [
            (name, value)
            for name, value in scope["headers"]
            if name not in (b"content-type", b"content-length")
        ]
        headers += [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ]

        sent = False

        async def receive_json() -> Message:
            nonlocal sent
            if sent:
                return await receive()
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}

        await self.app(dict(scope, headers=headers), receive_json, send)
